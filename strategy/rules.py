# strategy/rules.py
"""
Building blocks of the strategy table: a Spot (everything a rule may look
at) and a Rule (name + predicate + action). Predicates are plain functions
so the same objects both execute and document the table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Any

from core.config import ACE_HIGH
from core.models import Action, HandFacts, TableRules


@dataclass(frozen=True)
class Spot:
    hand: HandFacts
    dealer_value: int  # 2-11, ace = 11
    rules: TableRules
    card_count: int

    @property
    def total(self) -> int:
        return self.hand.total

    @property
    def is_soft(self) -> bool:
        return self.hand.is_soft

    @property
    def is_hard(self) -> bool:
        return not self.hand.is_soft


@dataclass(frozen=True)
class Rule:
    name: str
    section: str
    action: Action
    when: Callable[[Spot], bool]

    def matches(self, spot: Spot) -> bool:
        return bool(self.when(spot))

    def describe(self) -> Dict[str, Any]:
        return {"name": self.name, "section": self.section, "action": self.action.value}


# --- Predicate helpers ---

def dealer_between(spot: Spot, low: int, high: int) -> bool:
    return low <= spot.dealer_value <= high


def dealer_at_least(spot: Spot, low: int) -> bool:
    return spot.dealer_value >= low


def dealer_shows_ace(dealer_value: int) -> bool:
    return dealer_value == ACE_HIGH


def pair_of(spot: Spot, *values: int) -> bool:
    return spot.hand.can_split and spot.hand.pair_value in values

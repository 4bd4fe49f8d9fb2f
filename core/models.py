from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import DEFAULT_DECKS
from .errors import InvalidRules


class Action(str, Enum):
    HIT = "HIT"
    STAND = "STAND"
    DOUBLE = "DOUBLE"
    SPLIT = "SPLIT"
    SURRENDER = "SURRENDER"
    BLACKJACK = "BLACKJACK"


@dataclass(frozen=True)
class HandFacts:
    total: int
    is_soft: bool
    can_split: bool
    pair_value: Optional[int] = None  # raw value of the paired card, 11 for aces


@dataclass(frozen=True)
class TableRules:
    # das_allowed and decks are accepted but do not change the table yet
    das_allowed: bool = False
    surrender_allowed: bool = False
    decks: int = DEFAULT_DECKS

    def __post_init__(self) -> None:
        if self.decks < 1:
            raise InvalidRules("decks", self.decks, f"decks must be >= 1, got {self.decks}")


@dataclass(frozen=True)
class Situation:
    player_cards: Tuple[str, ...]
    dealer_card: str
    hand: HandFacts
    dealer_value: int
    rules: TableRules

    @property
    def card_count(self) -> int:
        return len(self.player_cards)


@dataclass(frozen=True)
class Recommendation:
    action: Action
    insurance: bool
    rule: str

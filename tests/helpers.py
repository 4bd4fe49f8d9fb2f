from __future__ import annotations

from typing import Sequence

from core.models import Recommendation, Situation, TableRules
from features.context import build_situation
from strategy.engine import recommend_action

DEALER_CARDS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "A"]


def make_situation(
    player: Sequence[str],
    dealer: str,
    *,
    surrender: bool = False,
    das: bool = False,
    decks: int = 6,
) -> Situation:
    rules = TableRules(das_allowed=das, surrender_allowed=surrender, decks=decks)
    return build_situation(list(player), [dealer], rules)


def advise(player: Sequence[str], dealer: str, **rules) -> Recommendation:
    """Build a situation and run it through the strategy table."""
    return recommend_action(make_situation(player, dealer, **rules))

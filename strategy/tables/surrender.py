# strategy/tables/surrender.py
from core.models import Action

from ..rules import Rule, dealer_at_least

SECTION = "surrender"


def _can_surrender(spot) -> bool:
    return spot.rules.surrender_allowed and spot.is_hard


SURRENDER_RULES = (
    Rule(
        "Surrender 16 vs 9-A", SECTION, Action.SURRENDER,
        lambda s: _can_surrender(s) and s.total == 16 and dealer_at_least(s, 9),
    ),
    Rule(
        "Surrender 15 vs 10", SECTION, Action.SURRENDER,
        lambda s: _can_surrender(s) and s.total == 15 and s.dealer_value == 10,
    ),
)

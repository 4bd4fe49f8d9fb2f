# strategy/tables/hard.py
from core.models import Action

from ..rules import Rule, dealer_between

SECTION = "hard"

# Covers every hard total, busted hands included (they read as 17+)
HARD_RULES = (
    Rule(
        "Hard 17+", SECTION, Action.STAND,
        lambda s: s.is_hard and s.total >= 17,
    ),
    Rule(
        "Hard 8 or less", SECTION, Action.HIT,
        lambda s: s.is_hard and s.total <= 8,
    ),
    Rule(
        "Hard 11", SECTION, Action.DOUBLE,
        lambda s: s.is_hard and s.total == 11,
    ),
    Rule(
        "Hard 10 vs 2-9", SECTION, Action.DOUBLE,
        lambda s: s.is_hard and s.total == 10 and s.dealer_value <= 9,
    ),
    Rule(
        "Hard 10 vs 10-A", SECTION, Action.HIT,
        lambda s: s.is_hard and s.total == 10,
    ),
    Rule(
        "Hard 9 vs 3-6", SECTION, Action.DOUBLE,
        lambda s: s.is_hard and s.total == 9 and dealer_between(s, 3, 6),
    ),
    Rule(
        "Hard 9 vs 2, 7-A", SECTION, Action.HIT,
        lambda s: s.is_hard and s.total == 9,
    ),
    Rule(
        "Hard 12-16 vs 2-6", SECTION, Action.STAND,
        lambda s: s.is_hard and 12 <= s.total <= 16 and s.dealer_value <= 6,
    ),
    Rule(
        "Hard 12-16 vs 7-A", SECTION, Action.HIT,
        lambda s: s.is_hard and 12 <= s.total <= 16,
    ),
)

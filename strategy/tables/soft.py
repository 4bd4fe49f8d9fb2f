# strategy/tables/soft.py
"""
Soft totals (an ace still counted as 11).

A,2-A,3 double vs 5-6, A,4-A,5 vs 4-6, A,6 vs 3-6. A,7 stands vs 2/7/8,
doubles vs 3-6 and hits vs 9-A. A,8 and up always stand.
"""
from core.models import Action

from ..rules import Rule, dealer_at_least, dealer_between

SECTION = "soft"

SOFT_RULES = (
    Rule(
        "Soft 19+", SECTION, Action.STAND,
        lambda s: s.is_soft and s.total >= 19,
    ),
    Rule(
        "Soft 18 vs 9-A", SECTION, Action.HIT,
        lambda s: s.is_soft and s.total == 18 and dealer_at_least(s, 9),
    ),
    Rule(
        "Soft 18 vs 3-6", SECTION, Action.DOUBLE,
        lambda s: s.is_soft and s.total == 18 and dealer_between(s, 3, 6),
    ),
    Rule(
        "Soft 18 vs 2, 7, 8", SECTION, Action.STAND,
        lambda s: s.is_soft and s.total == 18,
    ),
    Rule(
        "Soft 17 vs 3-6", SECTION, Action.DOUBLE,
        lambda s: s.is_soft and s.total == 17 and dealer_between(s, 3, 6),
    ),
    Rule(
        "Soft 15-16 vs 4-6", SECTION, Action.DOUBLE,
        lambda s: s.is_soft and 15 <= s.total <= 16 and dealer_between(s, 4, 6),
    ),
    Rule(
        "Soft 13-14 vs 5-6", SECTION, Action.DOUBLE,
        lambda s: s.is_soft and 13 <= s.total <= 14 and dealer_between(s, 5, 6),
    ),
    Rule(
        "Soft 17 or less", SECTION, Action.HIT,
        lambda s: s.is_soft,
    ),
)

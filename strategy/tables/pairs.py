# strategy/tables/pairs.py
from core.config import ACE_HIGH
from core.models import Action

from ..rules import Rule, dealer_between, pair_of

SECTION = "pairs"

# A pair that matches none of these is played as an ordinary total
PAIR_RULES = (
    Rule(
        "Split Aces and 8s", SECTION, Action.SPLIT,
        lambda s: pair_of(s, ACE_HIGH, 8),
    ),
    Rule(
        "Never split 10s", SECTION, Action.STAND,
        lambda s: pair_of(s, 10),
    ),
    Rule(
        "Split 2s, 3s, 7s vs 2-7", SECTION, Action.SPLIT,
        lambda s: pair_of(s, 2, 3, 7) and dealer_between(s, 2, 7),
    ),
    Rule(
        "Split 4s vs 5-6", SECTION, Action.SPLIT,
        lambda s: pair_of(s, 4) and dealer_between(s, 5, 6),
    ),
    Rule(
        "Split 6s vs 2-6", SECTION, Action.SPLIT,
        lambda s: pair_of(s, 6) and dealer_between(s, 2, 6),
    ),
    Rule(
        "Split 9s vs 2-9", SECTION, Action.SPLIT,
        lambda s: pair_of(s, 9) and dealer_between(s, 2, 9),
    ),
)

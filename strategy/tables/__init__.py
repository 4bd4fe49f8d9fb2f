# strategy/tables package
# Priority-ordered strategy table: the only place decisions are defined

from typing import Any, Dict, List

from core.config import BLACKJACK_TOTAL
from core.models import Action

from ..rules import Rule
from .hard import HARD_RULES
from .pairs import PAIR_RULES
from .soft import SOFT_RULES
from .surrender import SURRENDER_RULES

NATURAL_BLACKJACK = Rule(
    "Blackjack natural", "natural", Action.BLACKJACK,
    lambda s: s.card_count == 2 and s.total == BLACKJACK_TOTAL,
)

DEFAULT_HIT = Rule("Default hit", "default", Action.HIT, lambda s: True)

STRATEGY_TABLE = (
    NATURAL_BLACKJACK,
    *PAIR_RULES,
    *SURRENDER_RULES,
    *SOFT_RULES,
    *HARD_RULES,
    DEFAULT_HIT,
)


def describe_table() -> List[Dict[str, Any]]:
    """Declarative view of STRATEGY_TABLE, in execution order."""
    return [
        {"priority": idx, **rule.describe()}
        for idx, rule in enumerate(STRATEGY_TABLE, start=1)
    ]


__all__ = ["STRATEGY_TABLE", "NATURAL_BLACKJACK", "DEFAULT_HIT", "describe_table"]

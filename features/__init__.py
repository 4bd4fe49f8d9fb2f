# features package
# Thin aggregator: re-export card utilities and situation builder

from .cards import (  # noqa: F401
    CARD_VALUE,
    card_value,
    evaluate_hand,
    hand_totals,
    is_pair,
    normalize_card,
    normalize_hand,
)
from .context import build_situation  # noqa: F401

__all__ = [
    "CARD_VALUE",
    "card_value",
    "evaluate_hand",
    "hand_totals",
    "is_pair",
    "normalize_card",
    "normalize_hand",
    "build_situation",
]

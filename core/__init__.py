"""Shared constants, settings, models and errors for the blackjack coach."""

from .errors import AdviceError, InsufficientCards, InvalidCard, InvalidRules
from .models import Action, HandFacts, Recommendation, Situation, TableRules

__all__ = [
    "AdviceError",
    "InsufficientCards",
    "InvalidCard",
    "InvalidRules",
    "Action",
    "HandFacts",
    "Recommendation",
    "Situation",
    "TableRules",
]

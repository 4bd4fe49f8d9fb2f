# strategy/utils.py
from typing import Any, Dict

from core.models import Recommendation, Situation


def format_output(situation: Situation, rec: Recommendation, advice: str) -> Dict[str, Any]:
    """Response payload for one advice request."""
    hand = situation.hand
    return {
        "action": rec.action.value,
        "insurance": rec.insurance,
        "rule": rec.rule,
        "advice": advice,
        "hand": {
            "cards": list(situation.player_cards),
            "total": hand.total,
            "soft": hand.is_soft,
            "canSplit": hand.can_split,
        },
        "dealerCard": situation.dealer_card,
        "gameRules": {
            "dasAllowed": situation.rules.das_allowed,
            "surrenderAllowed": situation.rules.surrender_allowed,
            "decks": situation.rules.decks,
        },
    }

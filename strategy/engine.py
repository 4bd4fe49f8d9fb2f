# strategy/engine.py
import logging

from core.models import HandFacts, Recommendation, Situation, TableRules

from .rules import Spot, dealer_shows_ace
from .tables import DEFAULT_HIT, STRATEGY_TABLE

logger = logging.getLogger(__name__)


def resolve(hand: HandFacts, dealer_value: int, rules: TableRules, card_count: int) -> Recommendation:
    """
    Walk STRATEGY_TABLE top-down and return the first matching rule's action.
    Insurance is advisory and independent of the chosen action.
    """
    spot = Spot(hand=hand, dealer_value=dealer_value, rules=rules, card_count=card_count)
    insurance = dealer_shows_ace(dealer_value)

    rule = next((r for r in STRATEGY_TABLE if r.matches(spot)), DEFAULT_HIT)
    logger.debug(
        "resolved total=%d soft=%s dealer=%d cards=%d -> %s (%s)",
        hand.total, hand.is_soft, dealer_value, card_count, rule.action.value, rule.name,
    )
    return Recommendation(action=rule.action, insurance=insurance, rule=rule.name)


def recommend_action(situation: Situation) -> Recommendation:
    """Strategy entry point for a fully validated situation."""
    return resolve(situation.hand, situation.dealer_value, situation.rules, situation.card_count)

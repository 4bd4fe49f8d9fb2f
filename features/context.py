"""
Situation building: raw player/dealer input -> validated Situation.
Counts are checked before any symbol is evaluated so that a short hand is
always reported as InsufficientCards, never as a card error.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

from core.config import MIN_DEALER_CARDS, MIN_PLAYER_CARDS
from core.errors import InsufficientCards
from core.models import Situation, TableRules
from core.parser import split_card_input

from .cards import card_value, evaluate_hand, normalize_hand

logger = logging.getLogger(__name__)

CardInput = Union[str, Sequence[Any], None]


def _require_cards(role: str, cards: Sequence[Any], minimum: int) -> None:
    if len(cards) < minimum:
        raise InsufficientCards(role, minimum, len(cards))


def build_situation(
    player: CardInput,
    dealer: CardInput,
    rules: Optional[TableRules] = None,
) -> Situation:
    """
    Build the full decision input. Only the first dealer card is used for
    the decision, but every supplied dealer card must be a valid symbol.
    """
    player_raw = split_card_input(player)
    dealer_raw = split_card_input(dealer)

    _require_cards("player", player_raw, MIN_PLAYER_CARDS)
    _require_cards("dealer", dealer_raw, MIN_DEALER_CARDS)

    player_cards = normalize_hand(player_raw)
    dealer_cards = normalize_hand(dealer_raw)
    up_card = dealer_cards[0]

    situation = Situation(
        player_cards=tuple(player_cards),
        dealer_card=up_card,
        hand=evaluate_hand(player_cards),
        dealer_value=card_value(up_card),
        rules=rules or TableRules(),
    )
    logger.debug(
        "situation player=%s dealer=%s total=%d soft=%s split=%s",
        player_cards, up_card, situation.hand.total,
        situation.hand.is_soft, situation.hand.can_split,
    )
    return situation

"""
Card values and hand evaluation shared by the situation builder and the
strategy table.
"""
from __future__ import annotations
from typing import Any, Dict, List, Sequence

from core.config import ACE, ACE_HIGH, ACE_SOFT_DELTA, BLACKJACK_TOTAL, CARD_SYMBOLS, FACE_CARDS
from core.errors import InvalidCard
from core.models import HandFacts
from core.parser import normalize_card_token

CARD_VALUE: Dict[str, int] = {
    s: (ACE_HIGH if s == ACE else 10 if s in FACE_CARDS else int(s)) for s in CARD_SYMBOLS
}


def normalize_card(card: Any) -> str:
    """
    ' q' -> 'Q', 'a' -> 'A'.
    Raises InvalidCard for anything outside 2-10/J/Q/K/A.
    """
    symbol = normalize_card_token(card)
    if symbol not in CARD_VALUE:
        raise InvalidCard(card)
    return symbol


def card_value(card: Any) -> int:
    """Raw value of one card: numerals as printed, J/Q/K = 10, A = 11."""
    return CARD_VALUE[normalize_card(card)]


def normalize_hand(cards: Sequence[Any]) -> List[str]:
    return [normalize_card(c) for c in cards]


def is_pair(cards: Sequence[Any]) -> bool:
    """Two cards of equal value; 10/J/Q/K pair with each other."""
    if len(cards) != 2:
        return False
    return card_value(cards[0]) == card_value(cards[1])


def hand_totals(cards: Sequence[Any]) -> tuple[int, bool]:
    total = 0
    aces = 0
    for c in cards:
        val = card_value(c)
        if val == ACE_HIGH:
            aces += 1
        total += val
    # downgrade aces from 11 to 1 as needed
    while total > BLACKJACK_TOTAL and aces > 0:
        total -= ACE_SOFT_DELTA
        aces -= 1
    # soft if at least one ace remains valued as 11
    return total, aces > 0


def evaluate_hand(cards: Sequence[Any]) -> HandFacts:
    """
    Evaluate a player hand.
    ['A', '7'] -> HandFacts(total=18, is_soft=True, can_split=False)
    ['K', 'Q'] -> HandFacts(total=20, is_soft=False, can_split=True, pair_value=10)
    """
    symbols = normalize_hand(cards)
    total, soft = hand_totals(symbols)
    can_split = is_pair(symbols)
    return HandFacts(
        total=total,
        is_soft=soft,
        can_split=can_split,
        pair_value=CARD_VALUE[symbols[0]] if can_split else None,
    )

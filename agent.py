# agent.py
"""
Expression layer: turns a recommendation into one line of coaching text.
"""
from core.models import Action, Recommendation, Situation

_ACTION_TEXT = {
    Action.HIT: "HIT",
    Action.STAND: "STAND",
    Action.DOUBLE: "DOUBLE DOWN",
    Action.SPLIT: "SPLIT",
    Action.SURRENDER: "SURRENDER",
    Action.BLACKJACK: "BLACKJACK, nothing to decide",
}


def describe_hand(situation: Situation) -> str:
    hand = situation.hand
    if hand.can_split:
        label = "A" if situation.player_cards[0] == "A" else str(hand.pair_value)
        return f"Pair of {label}s"
    kind = "Soft" if hand.is_soft else "Hard"
    return f"{kind} {hand.total}"


def generate_advice(situation: Situation, rec: Recommendation) -> str:
    text = f"{describe_hand(situation)} vs dealer {situation.dealer_card}: {_ACTION_TEXT[rec.action]} ({rec.rule})."
    if rec.insurance:
        text += " Dealer shows an Ace: insurance is on offer."
    return text

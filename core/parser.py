"""
Core parsing logic for raw card input coming from the transport layer.
Turns loose payload values into card tokens; validity of a token is
decided later by the hand evaluator.
"""
from typing import Any, List, Sequence, Union
import re

# ==============================================================================
# Constants & Maps
# ==============================================================================

_SEPARATORS = re.compile(r"[\s,;/|]+")

# ==============================================================================
# Token Normalization
# ==============================================================================

def normalize_card_token(token: Any) -> str:
    """Normalize case and whitespace of one card symbol (e.g. ' k' -> 'K', 10 -> '10')."""
    if token is None:
        return ""
    if isinstance(token, bool):
        return str(token)
    if isinstance(token, int):
        return str(token)
    return str(token).strip().upper()


def split_card_string(text: str) -> List[str]:
    """Split 'A K' / 'A,K' / '10;J' into raw tokens."""
    if not text:
        return []
    return [part for part in _SEPARATORS.split(text.strip()) if part]

# ==============================================================================
# Structure Parsing
# ==============================================================================

def split_card_input(cards_data: Union[str, Sequence[Any], None]) -> List[Any]:
    """
    Accept a list of symbols or a single delimited string; always return a
    list of the tokens exactly as the caller sent them.
    """
    if cards_data is None:
        return []
    if isinstance(cards_data, str):
        return split_card_string(cards_data)
    return list(cards_data)

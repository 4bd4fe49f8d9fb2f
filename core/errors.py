"""Input-validation errors raised before a situation reaches the strategy table.

Every error carries a stable ``code`` and an HTTP status so the server can
render it without knowing the concrete class. The resolver itself never
raises: anything it does not cover lands on the default HIT rule.
"""
from typing import Any, Dict, Optional


class AdviceError(ValueError):
    """Base class for rejected advice requests."""

    code = "ADVICE_ERROR"
    http_status = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return {"error": body}


class InvalidCard(AdviceError):
    """A card symbol that is not one of 2-10, J, Q, K, A."""

    code = "INVALID_CARD"

    def __init__(self, card: Any):
        self.card = card
        super().__init__(f"invalid card value: {card}", {"card": str(card)})


class InsufficientCards(AdviceError):
    """Fewer player or dealer cards than a decision needs."""

    code = "INSUFFICIENT_CARDS"

    def __init__(self, role: str, required: int, received: int):
        self.role = role
        self.required = required
        self.received = received
        super().__init__(
            f"{role} needs at least {required} card(s), got {received}",
            {"role": role, "required": required, "received": received},
        )


class InvalidRules(AdviceError):
    """Table rules outside their allowed range (e.g. zero decks)."""

    code = "INVALID_RULES"

    def __init__(self, field: str, value: Any, message: str):
        self.field = field
        self.value = value
        super().__init__(message, {"field": field, "value": value})

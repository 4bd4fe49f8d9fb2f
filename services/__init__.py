from .auth import require_token

__all__ = ["require_token"]

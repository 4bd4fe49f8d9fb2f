import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, status

from core.config import get_settings

logger = logging.getLogger(__name__)


def require_token(authorization: Optional[str] = Header(default=None)) -> None:
    """
    Bearer-token guard for the advice API.
    With SECRET_TOKEN unset the check is skipped (local development).
    """
    settings = get_settings()
    if not settings.auth_enabled:
        return

    expected = f"Bearer {settings.secret_token}"
    if not authorization or not hmac.compare_digest(authorization.encode(), expected.encode()):
        logger.warning("rejected request with missing or wrong bearer token")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

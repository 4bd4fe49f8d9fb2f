# core/config.py
"""
Global settings: blackjack constants plus environment-driven server options.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# ==============================================================================
# Blackjack basics
# ==============================================================================

CARD_SYMBOLS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
FACE_CARDS = ("J", "Q", "K")
ACE = "A"
ACE_HIGH = 11
ACE_SOFT_DELTA = 10      # A counted as 11 -> 1
BLACKJACK_TOTAL = 21

MIN_PLAYER_CARDS = 2
MIN_DEALER_CARDS = 1
DEFAULT_DECKS = 6

# ==============================================================================
# Server settings (read from the environment on every call)
# ==============================================================================

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    secret_token: str
    extension_id: str
    allowed_origins: List[str]
    log_level: str

    @property
    def auth_enabled(self) -> bool:
        return bool(self.secret_token)

    @property
    def cors_origins(self) -> List[str]:
        # A configured browser extension is the only origin we answer to
        if self.extension_id:
            return [f"chrome-extension://{self.extension_id}"]
        return self.allowed_origins


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        secret_token=os.getenv("SECRET_TOKEN", ""),
        extension_id=os.getenv("EXTENSION_ID", ""),
        allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

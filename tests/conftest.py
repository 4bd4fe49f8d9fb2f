import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Keep a developer's .env from leaking auth or CORS settings into tests
    for key in ("SECRET_TOKEN", "EXTENSION_ID", "ALLOWED_ORIGINS", "PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

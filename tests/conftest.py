import logging
from collections.abc import Generator

import pytest

_SETTINGS_ENV = (
    "API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "STATS_PROVIDER",
    "STATS_SYSTEM_INSTRUCTION",
    "GEMINI_ENABLE_SEARCH",
    "GEMINI_THINKING_BUDGET",
    "OPENAI_API_KEY",
    "MAX_FETCH_ATTEMPTS",
    "INITIAL_BACKOFF_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials and overrides out of Settings()."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_log_handlers() -> Generator[None, None, None]:
    """Drop handlers that Log.configure attaches to captured streams."""
    logger = logging.getLogger("cricket_stats")
    saved = logger.handlers[:]
    yield
    logger.handlers[:] = saved

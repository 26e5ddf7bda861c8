"""Root conftest — shared test configuration."""

import logging

import pytest

from fieldguard.config import get_settings

_ENV_NAMES = (
    "FIELDGUARD_EXPLICIT",
    "FIELDGUARD_AUTOFIELDS",
    "FIELDGUARD_EXCLUDE",
    "FIELDGUARD_LOG_LEVEL",
    "FIELDGUARD_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Ensure tests never see the developer's FIELDGUARD_* environment."""
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_fieldguard_logger():
    """Undo handlers and level set by register_validation() / setup_logging()."""
    logger = logging.getLogger("fieldguard")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)

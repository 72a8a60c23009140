"""
Shared fixtures.
"""

import pytest
import structlog

from upce_decoder.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear cached settings and ignore any UPCE_ variables from the environment."""
    for name in (
        "UPCE_MAX_AVG_VARIANCE",
        "UPCE_MAX_INDIVIDUAL_VARIANCE",
        "UPCE_TRY_REVERSED",
        "UPCE_LOG_LEVEL",
        "UPCE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


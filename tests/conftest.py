"""Shared test fixtures and configuration."""

import pytest


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Clear service environment variables."""
    for key in ("LOG_LEVEL", "API_HOST", "API_PORT", "API_PREFIX", "DEBUG"):
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Context and Settings Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_scoped_state():
    """Drop the ambient execution context and cached settings around each test."""
    from scoped_config.core.context import clear_context
    from scoped_config.config.settings import reset_settings

    clear_context()
    reset_settings()

    yield

    clear_context()
    reset_settings()

"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV and an in-memory database before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest

from src.wtt.core.config import GatewayConfig, Settings, get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with default policies (no resource validation, no uniqueness)."""
    return Settings(database_url="sqlite+aiosqlite://")


@pytest.fixture
def gateway_config(settings: Settings) -> GatewayConfig:
    return settings.gateway_config()

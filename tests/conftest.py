"""Pytest configuration and shared fixtures for assertkit tests."""

import logging

import pytest
import structlog
from hypothesis import HealthCheck, settings

from assertkit import _config

# The autouse environment fixture below is safe to share across examples.
settings.register_profile('assertkit', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('assertkit')


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test uninitialized, with no assertkit environment."""
    monkeypatch.delenv('ASSERTKIT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('ASSERTKIT_LOG_JSON', raising=False)
    _config.reset()
    yield
    _config.reset()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def sink():
    """List collecting whatever a capture handler receives."""
    return []


@pytest.fixture
def debug_logging():
    """Enable assertkit logging at DEBUG."""
    from assertkit import init

    return init(log_level='DEBUG')

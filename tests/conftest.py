"""Pytest configuration and shared fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables before each test."""
    # Store original env vars
    original_env = os.environ.copy()

    # Start every test from default configuration
    for name in ("SUBNET_CALCULATOR_PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        os.environ.pop(name, None)

    yield

    # Restore original env vars after test
    os.environ.clear()
    os.environ.update(original_env)

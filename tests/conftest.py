# tests/conftest.py
"""
Pytest configuration and fixtures for featuredemo tests.
"""

import logging

import pytest

from featuredemo import DemoConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package log level around each test."""
    package_logger = logging.getLogger("featuredemo")
    level = package_logger.level

    yield

    package_logger.setLevel(level)


@pytest.fixture
def config():
    """Default demo configuration."""
    return DemoConfig()


@pytest.fixture
def verbose_config():
    return DemoConfig(verbose=True)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )

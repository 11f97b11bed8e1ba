"""
Shared pytest fixtures and configuration for cursorpage tests.

This module provides pagination declarations reused across the unit tests.
"""

import pytest

from cursorpage import Direction, PaginationConfig


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no external dependencies")


@pytest.fixture
def both_config() -> PaginationConfig:
    """Bidirectional declaration without defaults."""
    return PaginationConfig(direction=Direction.BOTH)


@pytest.fixture
def forward_config() -> PaginationConfig:
    """Forward-only declaration with a default page of 20."""
    return PaginationConfig(direction=Direction.FORWARD, default_first=20)


@pytest.fixture
def backward_config() -> PaginationConfig:
    """Backward-only declaration with a default page of 15."""
    return PaginationConfig(direction=Direction.BACKWARD, default_last=15)

"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the mwselenium test suite.
"""

import pytest

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "tests.fixtures.logging",
    "tests.fixtures.browser",
    "tests.fixtures.config",
]


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use network or a browser)"
    )
    config.addinivalue_line("markers", "property: Property-based tests")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def clean_environ(monkeypatch) -> None:
    """
    Remove every variable that would override environment configuration.

    Tests touching Config or Environment use this so that a developer's
    BROWSER or MEDIAWIKI_URL does not leak into the results.
    """
    from mwselenium.config import ENV_OVERRIDE_KEYS, ENVIRONMENT_VAR

    monkeypatch.delenv(ENVIRONMENT_VAR, raising=False)
    for key in ENV_OVERRIDE_KEYS:
        monkeypatch.delenv(key.upper(), raising=False)
    monkeypatch.delenv("LOGGING", raising=False)


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(mark.name == "integration" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)

"""
Browser factory fixtures.

Provides mock-wrapped fakes for the capabilities lookup, HTTP client factory
and session constructor, plus fresh factory types so that class-level
bindings declared in one test never leak into another.
"""

from typing import Any
from unittest.mock import Mock

import pytest

from mwselenium.browser_factory import BrowserFactory
from mwselenium.log import Logger
from tests.helpers.fakes import FakeCapabilities, FakeHttpClient, FakeSession


@pytest.fixture
def capabilities() -> Mock:
    """Capabilities lookup returning a new FakeCapabilities per call."""
    return Mock(side_effect=FakeCapabilities)


@pytest.fixture
def http_client() -> Mock:
    """HTTP client factory returning a new FakeHttpClient per call."""
    return Mock(side_effect=FakeHttpClient)


@pytest.fixture
def session_factory() -> Mock:
    """Session constructor; call_count is the number of browsers started."""
    return Mock(side_effect=FakeSession)


@pytest.fixture
def factory_options(capabilities: Mock, http_client: Mock, session_factory: Mock) -> dict[str, Any]:
    """Constructor arguments injecting the fakes into a factory."""
    return {
        "capabilities": capabilities,
        "http_client": http_client,
        "session_factory": session_factory,
    }


@pytest.fixture
def factory_class() -> type[BrowserFactory]:
    """A new BrowserFactory subclass with an empty registry of its own."""
    return type("LynxFactory", (BrowserFactory,), {})


@pytest.fixture
def factory(
    factory_class: type[BrowserFactory], test_logger: Logger, factory_options: dict[str, Any]
) -> BrowserFactory:
    """Instance of factory_class wired to the fakes."""
    return factory_class("lynx", test_logger, **factory_options)

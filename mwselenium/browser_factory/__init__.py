"""
Browser factories.

``new()`` picks the factory type for a browser name; every type shares the
base bindings (``browser_timeout``, ``remote_url``) and adds its own.

Example:
    factory = browser_factory.new("firefox", lg)
    session = factory.instance_for({"browser_size": "1280x1024"})
"""

from typing import Any

from .base import BrowserFactory, config_key, parse_size
from .bindings import Binding, BindingRegistry, noop
from .chrome import Chrome
from .firefox import Firefox

FACTORIES: dict[str, type[BrowserFactory]] = {
    "chrome": Chrome,
    "firefox": Firefox,
}


def factory_class(browser_name: str) -> type[BrowserFactory]:
    """Factory type for a browser name; BrowserFactory for names without one."""
    return FACTORIES.get(str(browser_name).lower(), BrowserFactory)


def new(browser_name: str, **kwargs: Any) -> BrowserFactory:
    """Create the factory for browser_name (kwargs go to its constructor)."""
    return factory_class(browser_name)(str(browser_name).lower(), **kwargs)


__all__ = [
    "Binding",
    "BindingRegistry",
    "BrowserFactory",
    "Chrome",
    "FACTORIES",
    "Firefox",
    "config_key",
    "factory_class",
    "new",
    "noop",
    "parse_size",
]

"""
Chrome browser factory.

Configuration is applied through Chrome command line switches.
"""

from typing import Any

from mwselenium.utils import is_enabled

from .base import BrowserFactory, parse_size


class Chrome(BrowserFactory):
    """Factory for Chrome (chromedriver) sessions."""


@Chrome.binding("browser_user_agent")
def _user_agent(user_agent: str, options: dict[str, Any]) -> None:
    options["capabilities"].add_argument(f"--user-agent={user_agent}")


@Chrome.binding("browser_language")
def _language(language: str, options: dict[str, Any]) -> None:
    options["capabilities"].add_argument(f"--lang={language}")


@Chrome.binding("browser_size")
def _size(size: Any, options: dict[str, Any]) -> None:
    width, height = parse_size(size)
    options["capabilities"].add_argument(f"--window-size={width},{height}")


@Chrome.binding("headless")
def _headless(headless: Any, options: dict[str, Any]) -> None:
    if is_enabled(headless):
        options["capabilities"].add_argument("--headless=new")

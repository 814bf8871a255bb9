"""
Firefox browser factory.

Configuration is applied through Firefox preferences and command line
arguments on the FirefoxOptions object.
"""

from typing import Any

from mwselenium.utils import is_enabled

from .base import BrowserFactory, parse_size


class Firefox(BrowserFactory):
    """Factory for Firefox (geckodriver) sessions."""


@Firefox.binding("browser_timeout")
def _script_timeout(timeout: Any, options: dict[str, Any]) -> None:
    # Slow-script prompts must not fire before the HTTP client times out
    timeout = int(timeout)
    options["capabilities"].set_preference("dom.max_script_run_time", timeout)
    options["capabilities"].set_preference("dom.max_chrome_script_run_time", timeout)


@Firefox.binding("browser_user_agent")
def _user_agent(user_agent: str, options: dict[str, Any]) -> None:
    options["capabilities"].set_preference("general.useragent.override", user_agent)


@Firefox.binding("browser_language")
def _language(language: str, options: dict[str, Any]) -> None:
    options["capabilities"].set_preference("intl.accept_languages", language)


@Firefox.binding("browser_size")
def _size(size: Any, options: dict[str, Any]) -> None:
    width, height = parse_size(size)
    options["capabilities"].add_argument(f"--width={width}")
    options["capabilities"].add_argument(f"--height={height}")


@Firefox.binding("headless")
def _headless(headless: Any, options: dict[str, Any]) -> None:
    if is_enabled(headless):
        options["capabilities"].add_argument("-headless")

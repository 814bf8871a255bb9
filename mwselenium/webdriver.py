"""
Selenium-backed defaults for the browser factory's injected capabilities.

- capabilities_for(browser_name): a fresh options object for the driver family
- default_http_client(): client configuration for the WebDriver connection
- new_session(options): a live WebDriverSession built from resolved options
"""

from typing import Any

from selenium import webdriver
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.client_config import ClientConfig

from .exceptions import ConfigError, SessionError
from .session import WebDriverSession

DEFAULT_REMOTE_URL = "http://127.0.0.1:4444"

# Seconds; matches Selenium's own default for remote connections
DEFAULT_HTTP_TIMEOUT = 120

_OPTIONS_CLASSES: dict[str, type[ArgOptions]] = {
    "firefox": webdriver.FirefoxOptions,
    "chrome": webdriver.ChromeOptions,
    "edge": webdriver.EdgeOptions,
    "safari": webdriver.SafariOptions,
}

# Local drivers, keyed by options class
_LOCAL_DRIVERS: list[tuple[type[ArgOptions], Any]] = [
    (webdriver.FirefoxOptions, webdriver.Firefox),
    (webdriver.ChromeOptions, webdriver.Chrome),
    (webdriver.EdgeOptions, webdriver.Edge),
    (webdriver.SafariOptions, webdriver.Safari),
]


def browser_names() -> list[str]:
    """Driver families known to capabilities_for()."""
    return sorted(_OPTIONS_CLASSES)


def capabilities_for(browser_name: str) -> ArgOptions:
    """
    Create the options (capabilities) object for a driver family.

    Raises:
        ConfigError: If the browser name is unknown
    """
    try:
        options_cls = _OPTIONS_CLASSES[str(browser_name).lower()]
    except KeyError:
        raise ConfigError(
            "unknown browser",
            browser=browser_name,
            known=",".join(browser_names()),
        ) from None
    return options_cls()


def default_http_client() -> ClientConfig:
    """Client configuration for the WebDriver HTTP connection."""
    return ClientConfig(
        remote_server_addr=DEFAULT_REMOTE_URL, timeout=DEFAULT_HTTP_TIMEOUT
    )


def new_session(options: dict[str, Any]) -> WebDriverSession:
    """
    Construct a browser session from resolved options.

    Uses a remote WebDriver when ``options["remote_url"]`` is set, otherwise
    starts the local driver matching the capabilities object.

    Raises:
        SessionError: If no local driver matches the capabilities object
    """
    capabilities = options["capabilities"]
    remote_url = options.get("remote_url")

    if remote_url:
        driver = webdriver.Remote(
            command_executor=remote_url,
            options=capabilities,
            client_config=options.get("http_client"),
        )
        return WebDriverSession(driver)

    for options_cls, driver_cls in _LOCAL_DRIVERS:
        if isinstance(capabilities, options_cls):
            return WebDriverSession(driver_cls(options=capabilities))

    raise SessionError(
        "no local driver for capabilities; set remote_url",
        capabilities=capabilities.__class__.__name__,
    )

"""
Browser sessions handed to test code.

Test steps only rely on the Session protocol; WebDriverSession adapts a
Selenium WebDriver to it and keeps the driver reachable for everything else.
"""

from typing import Any, Protocol, runtime_checkable

from selenium.webdriver.common.by import By


@runtime_checkable
class Session(Protocol):
    """Minimal capabilities test code needs from a browser session."""

    def navigate(self, url: str) -> None: ...

    def find_element(self, by: str, value: str) -> Any: ...

    def close(self) -> None: ...


class WebDriverSession:
    """
    Session backed by a Selenium WebDriver.

    Example:
        session = WebDriverSession(webdriver.Firefox())
        session.navigate("http://127.0.0.1:8080/wiki/Main_Page")
        session.find_element(By.ID, "firstHeading").text
        session.close()
    """

    def __init__(self, driver: Any) -> None:
        self._driver = driver
        self._closed = False

    @property
    def driver(self) -> Any:
        """The wrapped WebDriver."""
        return self._driver

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def current_url(self) -> str:
        return self._driver.current_url

    @property
    def title(self) -> str:
        return self._driver.title

    def navigate(self, url: str) -> None:
        self._driver.get(url)

    def find_element(self, by: str = By.ID, value: str | None = None) -> Any:
        return self._driver.find_element(by, value)

    def close(self) -> None:
        """Quit the driver. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._driver.quit()

    def __enter__(self) -> "WebDriverSession":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"WebDriverSession({self._driver.__class__.__name__}, {state})"

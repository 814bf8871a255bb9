"""
Minimal MediaWiki action API client.

Covers what account provisioning needs: tokens, account creation and login.
"""

from typing import Any

import requests

from .exceptions import ApiError
from .log import Logger, LoggerFactory

DEFAULT_TIMEOUT = 30


class MediawikiApi:
    """
    Client for a wiki's ``api.php`` endpoint.

    Example:
        api = MediawikiApi("http://127.0.0.1:8080/w/api.php", lg)
        api.create_account("Selenium-user", "s3cret-pass")
    """

    def __init__(
        self,
        url: str,
        lg: Logger | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._url = url
        self._lg = LoggerFactory.derive(lg or LoggerFactory.default(), "api")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def _request(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        action = params.get("action")
        params = {**params, "format": "json", "formatversion": "2"}

        try:
            if method == "GET":
                resp = self._session.get(self._url, params=params, timeout=self._timeout)
            else:
                resp = self._session.post(self._url, data=params, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.JSONDecodeError as e:
            raise ApiError("API returned invalid JSON", action=action, code="json") from e
        except requests.RequestException as e:
            raise ApiError("API request failed", action=action, code="http", error=e) from e

        if "error" in data:
            error = data["error"]
            raise ApiError(
                error.get("info", "API error"), action=action, code=error.get("code")
            )

        self._lg.trace("api request", extra={"action": action, "method": method})
        return data

    def token(self, token_type: str) -> str:
        """Fetch a token of the given type (``createaccount``, ``login``, ``csrf``)."""
        data = self._request(
            "GET", {"action": "query", "meta": "tokens", "type": token_type}
        )
        try:
            return data["query"]["tokens"][f"{token_type}token"]
        except KeyError:
            raise ApiError("token missing from response", code="notoken", type=token_type) from None

    def _check_status(self, action: str, result: dict[str, Any], username: str) -> None:
        status = result.get("status")
        if status != "PASS":
            raise ApiError(
                result.get("message", f"{action} did not pass"),
                action=action,
                code=status,
                username=username,
            )

    def create_account(self, username: str, password: str) -> dict[str, Any]:
        """
        Create an account.

        Raises:
            ApiError: On API errors or when creation does not pass
        """
        token = self.token("createaccount")
        data = self._request(
            "POST",
            {
                "action": "createaccount",
                "createtoken": token,
                "username": username,
                "password": password,
                "retype": password,
                "createreturnurl": self._url,
            },
        )
        result = data.get("createaccount", {})
        self._check_status("createaccount", result, username)
        self._lg.info("created account", extra={"user": username})
        return result

    def log_in(self, username: str, password: str) -> dict[str, Any]:
        """
        Log the client in; the session keeps the cookies.

        Raises:
            ApiError: On API errors or when login does not pass
        """
        token = self.token("login")
        data = self._request(
            "POST",
            {
                "action": "clientlogin",
                "logintoken": token,
                "username": username,
                "password": password,
                "loginreturnurl": self._url,
            },
        )
        result = data.get("clientlogin", {})
        self._check_status("clientlogin", result, username)
        self._lg.debug("logged in", extra={"user": username})
        return result

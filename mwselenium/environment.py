"""
Test environment: configuration, browsers and users for one scenario.

Example:
    env = Environment.load("beta")
    with env:
        browser = env.browser()
        browser.navigate(env.wiki_url("Special:UserLogin"))
        browser.find_element(By.ID, "wpName1").send_keys(env.user())

        with env.as_user("b"):
            env.user()  # mediawiki_user_b, or a provisioned "b" account
"""

from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

from . import browser_factory
from .browser_factory import BrowserFactory
from .config import DEFAULT_CONFIG_FILENAME, Config
from .exceptions import ConfigurationNotFound
from .log import LogConfig, Logger, LoggerFactory
from .session import Session
from .users import UserFactoryHelper

MISSING: Any = object()
_ABSENT: Any = object()

DEFAULT_BROWSER = "firefox"


class Environment:
    """
    Configuration-driven access to browsers and user accounts.

    Args:
        config: Config of the selected environment, or a plain mapping
        lg: Logger; defaults to a root logger configured from ``logging``
        api_factory: Builds the API client used to provision accounts
        factory_options: Extra constructor arguments for browser factories
            (``capabilities``, ``http_client``, ``session_factory``)
    """

    def __init__(
        self,
        config: Config | Mapping[str, Any],
        lg: Logger | None = None,
        api_factory: Callable[[str], Any] | None = None,
        factory_options: dict[str, Any] | None = None,
    ) -> None:
        self._config = config
        self._lg = lg or LoggerFactory.create_root(LogConfig.from_config(self._config_dict()))
        self._alternatives: dict[str, str] = {}
        self._factories: dict[str, BrowserFactory] = {}
        self._factory_options = factory_options or {}
        self._users = UserFactoryHelper(self, api_factory, self._lg)

    @classmethod
    def load(
        cls,
        name: str | None = None,
        path: str | Path | None = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> "Environment":
        """
        Load a named environment from environments.yml.

        Args:
            name: Environment block; defaults to MEDIAWIKI_ENVIRONMENT or "default"
            path: Configuration file; defaults to ./environments.yml
            extra: Values merged over the file block
            **kwargs: Passed to the Environment constructor
        """
        config = Config(path or DEFAULT_CONFIG_FILENAME, environment=name, extra=extra)
        return cls(config, **kwargs)

    def _config_dict(self) -> dict[str, Any]:
        if isinstance(self._config, Config):
            return self._config.to_dict()
        return dict(self._config)

    @property
    def config(self) -> Config | Mapping[str, Any]:
        return self._config

    @property
    def name(self) -> str | None:
        """Name of the environment block, if loaded from a file."""
        return self._config.environment if isinstance(self._config, Config) else None

    @property
    def lg(self) -> Logger:
        return self._lg

    # -------------------------------------------------------------------------
    # Configuration lookup
    # -------------------------------------------------------------------------

    def lookup(self, key: str, id: str | None = None, default: Any = MISSING) -> Any:
        """
        Look up a configuration value.

        With an id (or inside an alternative for key), ``<key>_<id>`` is
        looked up instead. Empty values count as missing.

        Args:
            key: Configuration key
            id: Alternative id
            default: Returned when the key is missing; callables are invoked

        Raises:
            ConfigurationNotFound: If the key is missing and no default is given
        """
        if id is None:
            id = self._alternatives.get(key)
        full_key = key if id is None else f"{key}_{id}"

        if full_key in self._config:
            value = self._config[full_key]
            if value is not None and value != "":
                return value

        if default is MISSING:
            raise ConfigurationNotFound(full_key, self.name)
        return default() if callable(default) else default

    def lookup_all(self, keys: Sequence[str], default: Any = MISSING) -> dict[str, Any]:
        """Look up several keys; without a default, missing keys are left out."""
        values = {}
        for key in keys:
            value = self.lookup(key, default=_ABSENT if default is MISSING else default)
            if value is not _ABSENT:
                values[key] = value
        return values

    def current_alternative(self, key: str) -> str | None:
        """Alternative id in effect for key, if any."""
        return self._alternatives.get(key)

    @contextmanager
    def with_alternative(self, keys: str | Sequence[str], id: str) -> Iterator["Environment"]:
        """Use ``<key>_<id>`` for each key within the block."""
        if isinstance(keys, str):
            keys = [keys]

        previous = {key: self._alternatives.get(key) for key in keys}
        self._alternatives.update({key: id for key in keys})
        try:
            yield self
        finally:
            for key, value in previous.items():
                if value is None:
                    self._alternatives.pop(key, None)
                else:
                    self._alternatives[key] = value

    def as_user(self, id: str) -> Any:
        """Switch user and password to the alternative account id within the block."""
        return self.with_alternative(list(UserFactoryHelper.CONFIG_KEYS.values()), id)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @property
    def users(self) -> UserFactoryHelper:
        return self._users

    def user(self, id: str | None = None) -> str:
        """Username of the default or alternative account."""
        return self._users.user(id)

    def password(self, id: str | None = None) -> str:
        """Password of the default or alternative account."""
        return self._users.password(id)

    # -------------------------------------------------------------------------
    # Wiki
    # -------------------------------------------------------------------------

    def wiki_url(self, path: str | None = None) -> str:
        """URL of the wiki, or of a page/path relative to it."""
        base = self.lookup("mediawiki_url")
        if path is None:
            return base
        return urljoin(base, path)

    @property
    def api_url(self) -> str:
        """``mediawiki_api_url``, defaulting to /w/api.php on the wiki's host."""
        return self.lookup(
            "mediawiki_api_url", default=lambda: urljoin(self.wiki_url(), "/w/api.php")
        )

    # -------------------------------------------------------------------------
    # Browsers
    # -------------------------------------------------------------------------

    @property
    def browser_name(self) -> str:
        return str(self.lookup("browser", default=DEFAULT_BROWSER)).lower()

    def browser_factory(self, name: str | None = None) -> BrowserFactory:
        """The factory for a browser name (default: configured browser), one per name."""
        name = (name or self.browser_name).lower()
        if name not in self._factories:
            self._factories[name] = browser_factory.new(
                name, lg=self._lg, **self._factory_options
            )
        return self._factories[name]

    def browser_config(self, name: str | None = None) -> dict[str, Any]:
        """Configured values for the options the factory's bindings use."""
        keys = self.browser_factory(name).bindings().option_names()
        return self.lookup_all(keys)

    def browser(self, name: str | None = None) -> Session:
        """Browser session for the current configuration (cached by the factory)."""
        return self.browser_factory(name).instance_for(self.browser_config(name))

    def visit_wiki(self, path: str | None = None) -> Session:
        """Open the wiki (or a path on it) in the current browser."""
        session = self.browser()
        session.navigate(self.wiki_url(path))
        return session

    def teardown(self) -> None:
        """Close every browser opened through this environment."""
        for factory in self._factories.values():
            factory.close_all()

    def __enter__(self) -> "Environment":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.teardown()

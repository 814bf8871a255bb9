"""
Browser factory: resolves configuration into browser options and caches sessions.

Each factory class owns a registry of default bindings, declared with
``bind()`` or the ``binding()`` decorator. A factory instance adds its own
bindings with ``configure()`` and fixed configuration with ``override()``.

Example:
    factory = Firefox("firefox", lg)
    factory.configure("browser_proxy", callback=set_proxy)
    factory.override(headless=True)

    session = factory.instance_for({"browser_user_agent": "test-agent"})
    session is factory.instance_for({"browser_user_agent": "test-agent"})  # True
"""

import threading
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from mwselenium import webdriver
from mwselenium.exceptions import ConfigError
from mwselenium.log import Logger, LoggerFactory
from mwselenium.session import Session

from .bindings import Binding, BindingCallback, BindingRegistry, noop

CapabilitiesLookup = Callable[[str], Any]
HttpClientFactory = Callable[[], Any]
SessionFactory = Callable[[dict[str, Any]], Session]


def _freeze(value: Any) -> Any:
    """Hashable, content-equal form of a configuration value."""
    if isinstance(value, Mapping):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return value


def config_key(config: Mapping[str, Any]) -> frozenset:
    """Cache key for a configuration: equal content gives an equal key."""
    return _freeze(config)


def parse_size(value: Any) -> tuple[int, int]:
    """
    Parse a "WIDTHxHEIGHT" browser size.

    Raises:
        ConfigError: If the value is not of that form
    """
    if isinstance(value, (list, tuple)) and len(value) == 2:
        width, height = value
    else:
        width, _, height = str(value).lower().partition("x")
    try:
        return int(width), int(height)
    except (TypeError, ValueError):
        raise ConfigError("invalid browser size", size=value) from None


class BrowserFactory:
    """
    Builds browser sessions from declarative configuration bindings.

    Args:
        browser_name: Driver family, passed to the capabilities lookup
        lg: Logger; a "browser_factory" view of it is used
        capabilities: Lookup returning the capabilities object for browser_name
        http_client: Factory returning the HTTP client configuration
        session_factory: Constructor turning resolved options into a session
    """

    _default_bindings: ClassVar[BindingRegistry] = BindingRegistry()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Every factory type gets its own registry; parents are merged at query time
        cls._default_bindings = BindingRegistry()

    def __init__(
        self,
        browser_name: str,
        lg: Logger | None = None,
        capabilities: CapabilitiesLookup | None = None,
        http_client: HttpClientFactory | None = None,
        session_factory: SessionFactory | None = None,
    ) -> None:
        self._browser_name = browser_name
        self._lg = LoggerFactory.derive(lg or LoggerFactory.default(), "browser_factory")
        self._capabilities = capabilities or webdriver.capabilities_for
        self._http_client = http_client or webdriver.default_http_client
        self._session_factory = session_factory or webdriver.new_session

        self._bindings = BindingRegistry()
        self._overrides: dict[str, Any] = {}
        self._browsers: dict[frozenset, Session] = {}
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Class-level bindings
    # -------------------------------------------------------------------------

    @classmethod
    def bind(cls, *option_names: str, callback: BindingCallback | None = None) -> Binding:
        """
        Declare a default binding for every instance of this factory type.

        Raises:
            BindingError: If no callback is given
        """
        return cls._default_bindings.register(option_names, callback)

    @classmethod
    def binding(cls, *option_names: str) -> Callable[[BindingCallback], BindingCallback]:
        """
        Decorator form of bind().

        Example:
            @Firefox.binding("browser_user_agent")
            def _user_agent(user_agent, options):
                options["capabilities"].set_preference(
                    "general.useragent.override", user_agent
                )
        """

        def decorator(callback: BindingCallback) -> BindingCallback:
            cls.bind(*option_names, callback=callback)
            return callback

        return decorator

    @classmethod
    def default_bindings(cls) -> BindingRegistry:
        """Bindings declared on this class itself."""
        return cls._default_bindings

    @classmethod
    def class_bindings(cls) -> BindingRegistry:
        """Bindings of this class and its factory ancestors, base class first."""
        registries = [
            klass.__dict__["_default_bindings"]
            for klass in reversed(cls.__mro__)
            if "_default_bindings" in klass.__dict__
        ]
        return BindingRegistry.merge(*registries)

    # -------------------------------------------------------------------------
    # Instance-level configuration
    # -------------------------------------------------------------------------

    @property
    def browser_name(self) -> str:
        return self._browser_name

    @property
    def overrides(self) -> dict[str, Any]:
        return dict(self._overrides)

    def configure(
        self, *option_names: str, callback: BindingCallback | None = None
    ) -> Binding:
        """Declare a binding for this instance only; defaults to a no-op callback."""
        return self._bindings.register(
            option_names, callback if callback is not None else noop
        )

    def override(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Fix configuration values for every later resolution on this instance."""
        self._overrides.update(overrides or {})
        self._overrides.update(kwargs)
        self._lg.debug("configuration overridden", extra={"keys": sorted(self._overrides)})

    def bindings(self) -> BindingRegistry:
        """Class-level bindings followed by this instance's bindings."""
        return BindingRegistry.merge(self.class_bindings(), self._bindings)

    # -------------------------------------------------------------------------
    # Resolution and sessions
    # -------------------------------------------------------------------------

    def merged_config(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """Copy of config with the overrides applied."""
        merged = dict(config)
        merged.update(self._overrides)
        return merged

    def resolve(self, config: Mapping[str, Any]) -> dict[str, Any]:
        """
        Resolve configuration into the options used to construct a browser.

        Every binding whose option names are all present in the merged
        configuration is called with their values and the options dict.
        Other bindings are skipped without being called.
        """
        return self._resolve_merged(self.merged_config(config))

    def _resolve_merged(self, config: dict[str, Any]) -> dict[str, Any]:
        options: dict[str, Any] = {
            "capabilities": self._capabilities(self._browser_name),
            "http_client": self._http_client(),
        }

        for binding in self.bindings().bindings():
            if binding(config, options):
                self._lg.trace("applied binding", extra={"options": binding.option_names})
            else:
                self._lg.trace2("skipped binding", extra={"options": binding.option_names})

        return options

    def instance_for(self, config: Mapping[str, Any]) -> Session:
        """
        Get the session for configuration, constructing it on first request.

        Sessions are cached by the merged configuration's content. A failed
        construction propagates and leaves nothing in the cache.
        """
        merged = self.merged_config(config)
        key = config_key(merged)

        with self._lock:
            if key in self._browsers:
                self._lg.trace("reusing browser", extra={"browser": self._browser_name})
                return self._browsers[key]

            options = self._resolve_merged(merged)
            try:
                session = self._session_factory(options)
            except Exception as e:
                self._lg.debug(
                    "browser construction failed",
                    extra={"browser": self._browser_name, "exception": e},
                )
                raise

            self._browsers[key] = session
            self._lg.info(
                "created browser",
                extra={"browser": self._browser_name, "cached": len(self._browsers)},
            )
            return session

    def sessions(self) -> list[Session]:
        """Live sessions, in creation order."""
        with self._lock:
            return list(self._browsers.values())

    def close_all(self) -> None:
        """Close every cached session and empty the cache."""
        with self._lock:
            browsers = list(self._browsers.values())
            self._browsers.clear()

        for session in browsers:
            try:
                session.close()
            except Exception as e:
                self._lg.error(
                    "error closing browser",
                    extra={"browser": self._browser_name, "exception": e},
                )
        if browsers:
            self._lg.debug("closed browsers", extra={"count": len(browsers)})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._browser_name!r})"


@BrowserFactory.binding("browser_timeout")
def _http_timeout(timeout: Any, options: dict[str, Any]) -> None:
    options["http_client"].timeout = int(timeout)


@BrowserFactory.binding("remote_url")
def _remote_url(url: str, options: dict[str, Any]) -> None:
    options["remote_url"] = url
    options["http_client"].remote_server_addr = url

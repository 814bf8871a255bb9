from importlib.metadata import PackageNotFoundError, version

from .browser_factory import (
    Binding,
    BindingRegistry,
    BrowserFactory,
    Chrome,
    Firefox,
)
from .config import Config
from .dot_dict import DotDict
from .environment import Environment
from .exceptions import (
    ApiError,
    BindingError,
    ConfigError,
    ConfigurationNotFound,
    FixtureError,
    ProvisioningError,
    SessionError,
)
from .session import Session, WebDriverSession
from .users import Account, UserFactory, lazy_provision

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("mwselenium")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    # Version
    "__version__",
    # Browser factories
    "Binding",
    "BindingRegistry",
    "BrowserFactory",
    "Chrome",
    "Firefox",
    # Sessions
    "Session",
    "WebDriverSession",
    # Environment and users
    "Environment",
    "Config",
    "DotDict",
    "Account",
    "UserFactory",
    "lazy_provision",
    # Exceptions
    "FixtureError",
    "ConfigError",
    "ConfigurationNotFound",
    "BindingError",
    "ProvisioningError",
    "ApiError",
    "SessionError",
]

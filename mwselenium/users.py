"""
User accounts provisioned on first reference.

With ``user_factory: true`` in the environment, ``env.user()`` and
``env.password()`` create a wiki account through the API the first time an
account id is referenced in a scenario, and return the same account for
every later reference:

    env.user()        # creates Selenium-1a2b3c, returns its name
    env.password()    # same account, no second API call
    env.user("b")     # creates Selenium-1a2b3c-b
"""

import secrets
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from .api import MediawikiApi
from .log import Logger, LoggerFactory
from .utils import is_enabled

if TYPE_CHECKING:
    from .environment import Environment

K = TypeVar("K")
V = TypeVar("V")


def lazy_provision(cache: MutableMapping[K, V], key: K, provision: Callable[[K], V]) -> V:
    """
    Return cache[key], provisioning it on first access.

    provision is called at most once per key; if it raises, nothing is cached
    and the next access tries again.
    """
    if key not in cache:
        cache[key] = provision(key)
    return cache[key]


@dataclass(frozen=True)
class Account:
    """Credentials of a provisioned account."""

    user: str
    password: str

    def __getitem__(self, field: str) -> str:
        if field not in ("user", "password"):
            raise KeyError(field)
        return getattr(self, field)


class UserFactory:
    """
    Creates uniquely named accounts, once per account id.

    Args:
        api: Client with a ``create_account(username, password)`` method
        lg: Logger; a "users" view of it is used
        prefix: Username prefix; defaults to a random per-factory prefix
    """

    def __init__(self, api: Any, lg: Logger | None = None, prefix: str | None = None) -> None:
        self._api = api
        self._lg = LoggerFactory.derive(lg or LoggerFactory.default(), "users")
        self._prefix = prefix or f"Selenium-{secrets.token_hex(3)}"
        self._accounts: dict[str | None, Account] = {}

    @property
    def prefix(self) -> str:
        return self._prefix

    def accounts(self) -> dict[str | None, Account]:
        """Accounts created so far, by id (None for the default account)."""
        return dict(self._accounts)

    def create(self, id: str | None = None) -> Account:
        """Get the account for id, creating it on first request."""
        return lazy_provision(self._accounts, id, self._provision)

    def _username(self, id: str | None) -> str:
        return self._prefix if id is None else f"{self._prefix}-{id}"

    def _provision(self, id: str | None) -> Account:
        account = Account(self._username(id), secrets.token_urlsafe(16))
        self._lg.debug("provisioning account", extra={"id": id, "user": account.user})
        self._api.create_account(account.user, account.password)
        return account


class UserFactoryHelper:
    """
    ``user`` and ``password`` lookups for an Environment.

    Falls back to the configured ``mediawiki_user`` / ``mediawiki_password``
    unless ``user_factory`` is enabled.
    """

    CONFIG_KEYS = {"user": "mediawiki_user", "password": "mediawiki_password"}

    def __init__(
        self,
        env: "Environment",
        api_factory: Callable[[str], Any] | None = None,
        lg: Logger | None = None,
    ) -> None:
        self._env = env
        self._lg = lg
        self._api_factory = api_factory or (lambda url: MediawikiApi(url, lg))
        self._factory: UserFactory | None = None

    @property
    def enabled(self) -> bool:
        return is_enabled(self._env.lookup("user_factory", default=False))

    def factory(self) -> UserFactory:
        """The UserFactory, created with an API client on first use."""
        if self._factory is None:
            self._factory = UserFactory(self._api_factory(self._env.api_url), self._lg)
        return self._factory

    def user(self, id: str | None = None) -> str:
        return self._account_field("user", id)

    def password(self, id: str | None = None) -> str:
        return self._account_field("password", id)

    def _account_field(self, field: str, id: str | None) -> str:
        config_key = self.CONFIG_KEYS[field]
        if not self.enabled:
            return self._env.lookup(config_key, id=id)

        alt_id = self._env.current_alternative(config_key)

        # Within an alternative, an explicitly configured value wins
        if alt_id is not None and alt_id == id:
            return self._env.lookup(
                config_key,
                id=alt_id,
                default=lambda: self.factory().create(alt_id)[field],
            )

        return self.factory().create(id if id is not None else alt_id)[field]

"""
Environment configuration loaded from ``environments.yml``.

The file holds one block per named environment:

    default:
      mediawiki_url: http://127.0.0.1:8080/wiki/
      mediawiki_api_url: http://127.0.0.1:8080/w/api.php
      mediawiki_user: Selenium_user
      mediawiki_password: ${mediawiki_user}_secret
      browser: firefox
      user_factory: true

    beta:
      mediawiki_url: https://en.wikipedia.beta.wmflabs.org/wiki/
      ...

One block is selected (explicit name, then ``MEDIAWIKI_ENVIRONMENT``, then
``default``), ``${key}`` references are resolved against it, and any
upper-cased key present in the process environment overrides the file value.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from mwselenium.dot_dict import DotDict, DotDictPathNotFoundError
from mwselenium.exceptions import ConfigError

from .constants import (
    DEFAULT_ENVIRONMENT,
    ENV_OVERRIDE_KEYS,
    ENVIRONMENT_VAR,
    MAX_CONFIG_SIZE_BYTES,
    STRING_KEY_PREFIXES,
)


def _check_file_size(path: Path) -> None:
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "configuration file too large",
            path=str(path),
            size=file_size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )


def _load_yaml(path: Path) -> dict[str, Any]:
    _check_file_size(path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError("invalid YAML", path=str(path), error=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping of environments", path=str(path))
    return data


def select_environment(name: str | None = None) -> str:
    """Name of the environment block to use."""
    return name or os.environ.get(ENVIRONMENT_VAR) or DEFAULT_ENVIRONMENT


class Config(DotDict):
    """
    Configuration of one named environment.

    Extends DotDict, so values are available as ``config.browser`` and
    ``config["browser"]``, and nested sections by dotted path
    (``config.get("logging.level")``).

    Example:
        config = Config("environments.yml", environment="beta")
        config.mediawiki_url
    """

    def __init__(
        self,
        fname: str | Path | None = None,
        environment: str | None = None,
        enable_env_overrides: bool = True,
        extra: dict[str, Any] | None = None,
    ):
        """
        Load an environment block.

        Args:
            fname: Path to environments.yml; None starts from an empty block
            environment: Name of the block (see select_environment)
            enable_env_overrides: Apply overrides from os.environ
            extra: Values merged over the file block, before env overrides
        """
        super().__init__()
        self._environment = select_environment(environment)
        self._enable_env_overrides = enable_env_overrides
        self._config_path = Path(fname).resolve() if fname is not None else None

        environments = _load_yaml(self._config_path) if self._config_path else {}
        self._load(environments, extra or {})

    @classmethod
    def from_dict(
        cls,
        environments: dict[str, Any],
        environment: str | None = None,
        enable_env_overrides: bool = True,
    ) -> "Config":
        """Build a Config from an in-memory mapping of environment blocks."""
        config = cls(environment=environment, enable_env_overrides=enable_env_overrides)
        config._load(environments, {})
        return config

    @property
    def environment(self) -> str:
        """Name of the selected environment block."""
        return self._environment

    @property
    def path(self) -> Path | None:
        return self._config_path

    def _load(self, environments: dict[str, Any], extra: dict[str, Any]) -> None:
        if self._config_path is not None or environments:
            if self._environment not in environments:
                raise ConfigError(
                    "unknown environment",
                    environment=self._environment,
                    available=",".join(sorted(map(str, environments))),
                )
            block = environments[self._environment] or {}
            if not isinstance(block, dict):
                raise ConfigError("environment must be a mapping", environment=self._environment)
        else:
            block = {}

        data = {str(k): v for k, v in block.items()}
        data.update(extra)

        if self._enable_env_overrides:
            data = self._apply_env_overrides(data)

        self.clear()
        self.set(**data)
        self.set(**self._resolve(self.dict()))

    def _resolve(self, content: Any) -> Any:
        """Recursively resolve ${key} references against this configuration."""
        if isinstance(content, dict):
            for k in list(content.keys()):
                content[k] = self._resolve(content[k])
        elif isinstance(content, str):
            return re.sub(r"\$\{([a-zA-Z0-9_.]+)\}", self._substitute_var, content)
        return content

    def _substitute_var(self, match: re.Match) -> str:
        var_name = match.group(1)
        if not self.has(var_name):
            raise DotDictPathNotFoundError(self, var_name)
        return str(self.get(var_name))

    def _apply_env_overrides(self, data: dict[str, Any]) -> dict[str, Any]:
        for key in set(data) | ENV_OVERRIDE_KEYS:
            env_key = key.upper()
            if env_key in os.environ:
                data[key] = self._env_value(key, os.environ[env_key], data.get(key))
        return data

    @classmethod
    def _env_value(cls, key: str, raw: str, current: Any) -> Any:
        """
        Value for an override of key.

        Credentials and keys whose file value is a string keep the raw text,
        so "0123" stays "0123"; other values go through _convert_env_value.
        """
        if isinstance(current, str) or key.startswith(STRING_KEY_PREFIXES):
            return raw
        return cls._convert_env_value(raw)

    @staticmethod
    def _convert_env_value(value: str) -> bool | int | float | str | None:
        """
        Convert an environment variable string to an appropriate type.

        Lists are not split on commas, user agent strings contain them.
        """
        if value.lower() in ("null", "none", ""):
            return None

        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def get_env_overrides(self) -> dict[str, Any]:
        """Overrides that the current process environment would apply."""
        if not self._enable_env_overrides:
            return {}

        return {
            key: self._env_value(key, os.environ[key.upper()], self.get(key))
            for key in set(self.keys()) | ENV_OVERRIDE_KEYS
            if key.upper() in os.environ
        }

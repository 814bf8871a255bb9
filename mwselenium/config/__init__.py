"""
Environment configuration package.

Provides the Config class loading one block of ``environments.yml`` with
``${key}`` substitution and process-environment overrides.
"""

from .config import Config, select_environment
from .constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ENVIRONMENT,
    ENV_OVERRIDE_KEYS,
    ENVIRONMENT_VAR,
    MAX_CONFIG_SIZE_BYTES,
    STRING_KEY_PREFIXES,
)

__all__ = [
    "Config",
    "select_environment",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_ENVIRONMENT",
    "ENV_OVERRIDE_KEYS",
    "ENVIRONMENT_VAR",
    "MAX_CONFIG_SIZE_BYTES",
    "STRING_KEY_PREFIXES",
]

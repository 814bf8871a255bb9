"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULT_CONFIG_FILENAME = "environments.yml"
DEFAULT_ENVIRONMENT = "default"

# Environment variable selecting the environment block
ENVIRONMENT_VAR = "MEDIAWIKI_ENVIRONMENT"

# Keys that may be set from the process environment even when the selected
# block doesn't mention them (BROWSER=chrome, MEDIAWIKI_URL=..., ...)
ENV_OVERRIDE_KEYS = frozenset(
    {
        "browser",
        "browser_language",
        "browser_size",
        "browser_timeout",
        "browser_user_agent",
        "headless",
        "mediawiki_api_url",
        "mediawiki_password",
        "mediawiki_url",
        "mediawiki_user",
        "remote_url",
        "user_factory",
    }
)

# Overrides for these keys (and their alternatives, mediawiki_user_b, ...)
# are never type-converted
STRING_KEY_PREFIXES = ("mediawiki_user", "mediawiki_password")

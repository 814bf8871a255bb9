"""
Utility functions for interpreting configuration values.
"""

from typing import Any


def is_enabled(value: Any) -> bool:
    """
    Interpret a flag from YAML or the process environment.

    Args:
        value: bool, number or string such as "true", "yes", "1", "on"

    Returns:
        bool: True if the flag is set
    """
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)

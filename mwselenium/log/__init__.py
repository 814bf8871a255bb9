"""
Structured logging for mwselenium.

Components accept an optional logger and derive a tagged view of it:

    from mwselenium.log import LogConfig, LoggerFactory

    root = LoggerFactory.create_root(LogConfig.from_params("debug"))
    lg = LoggerFactory.derive(root, "browser_factory")
    lg.debug("resolved options", extra={"browser": "firefox"})
"""

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter, format_extra
from .logger import Logger

__all__ = [
    "LogConfig",
    "LogConstants",
    "LogError",
    "InvalidLogLevelError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "format_extra",
]

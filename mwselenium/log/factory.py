"""
Factory for creating and configuring loggers.
"""

import logging
import sys
from typing import Any, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger

# Lazily created logger for components constructed without one
_default_logger: Logger | None = None


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig) -> Logger:
        """
        Create the root logger ("/") with the specified configuration.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("scenario started")
            [12:34:56,789] [I] scenario started [/]
        """
        return LoggerFactory.create("/", config)

    @staticmethod
    def create(
        name: str, config: LogConfig, extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Create a logger writing to stdout.

        Returns the already registered logger if one exists under ``name``.

        Example:
            >>> lg = LoggerFactory.create("/scenario", config, extra={"run": 3})
            >>> lg.info("started")
            [12:34:56,789] [I] started                          [run:3] [/scenario]
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        lg = Logger(name, config, extra)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.NOTSET)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        logging.root.manager.loggerDict[name] = lg
        lg.trace2(
            "created logger",
            extra={"level": logging.getLevelName(lg.level), "location": config.location},
        )
        return lg

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return existing
        return None

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to the root's handlers.

        Examples:
            >>> LoggerFactory.derive(root, "browser_factory").name
            '/browser_factory'
            >>> LoggerFactory.derive(root, ["users", "api"]).name
            '/users/api'
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name.endswith("/") else parent.name + "/"
        name = prefix + "/".join(tags)

        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        root = parent._root_logger or parent
        lg = parent.__class__(name, parent.config)
        lg.setLevel(logging.NOTSET)
        lg._root_logger = root
        lg.parent = parent
        lg.propagate = False

        logging.root.manager.loggerDict[name] = lg
        lg.trace2("derived logger", extra={"root": root.name})
        return lg

    @staticmethod
    def default() -> Logger:
        """
        Get the shared fallback logger, creating it on first use.

        Used by components that were not handed a logger. Only warnings and
        errors are shown.
        """
        global _default_logger

        if _default_logger is None:
            _default_logger = LoggerFactory.create(
                "/mwselenium", LogConfig.from_params("warning", colors=False)
            )
        return cast(Logger, _default_logger)

"""
Log formatter rendering messages with their structured extra fields.

Output looks like:

    [12:34:56,789] [I] created browser        [browser:firefox] [/browser_factory]
"""

import logging
import os
from typing import Any

from .config import LogConfig
from .constants import LogConstants


def _format_value(key: str, value: Any) -> str:
    if key == "exception" and isinstance(value, BaseException):
        return f"{value.__class__.__name__}: {value}"
    if isinstance(value, (list, tuple)):
        return ",".join(map(str, value))
    return str(value)


def format_extra(extra: dict[str, Any] | None) -> str:
    """Render extra fields as ``[key:value]`` pairs, sorted by key."""
    if not extra:
        return ""
    return " ".join(f"[{k}:{_format_value(k, extra[k])}]" for k in sorted(extra))


class LogFormatter(logging.Formatter):
    """Formatter for mwselenium loggers."""

    def __init__(self, config: LogConfig) -> None:
        super().__init__(LogConstants.DEFAULT_FORMAT, datefmt="%H:%M:%S")
        self._config = config

    @property
    def config(self) -> LogConfig:
        return self._config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        base = super().formatTime(record, datefmt)
        if self._config.micros:
            return f"{base},{int(record.msecs * 1000):06d}"
        return f"{base},{int(record.msecs):03d}"

    def _level_color(self, levelno: int) -> str:
        if levelno < logging.DEBUG:
            return LogConstants.TRACE_COLOR
        return LogConstants.LEVEL_COLORS.get(levelno, "")

    def _render_location(self, record: logging.LogRecord) -> str:
        if self._config.location <= 0:
            return ""
        return f" [{os.path.basename(record.pathname)}:{record.lineno}]"

    def format(self, record: logging.LogRecord) -> str:
        head = super().format(record)
        # Exception text is appended by the base class after the first line
        first, sep, rest = head.partition("\n")
        width = len(first)

        if self._config.colors:
            color = self._level_color(record.levelno)
            if color:
                first = first.replace(
                    f"[{record.levelname[:1]}]",
                    f"[{color}{record.levelname[:1]}{LogConstants.RESET}]",
                    1,
                )

        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        extra = format_extra(getattr(record, "__mws__extra", None))
        if extra:
            first += " " * max(1, rule - width) + extra

        first += f" [{record.name}]" + self._render_location(record)
        return first + sep + rest

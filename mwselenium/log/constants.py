"""
Constants for the logging system.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Column at which extra fields start
    DEFAULT_RULE_WIDTH: int = 70
    MICRO_RULE_WIDTH: int = 74

    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5, "TRACE2": 4}

    LEVEL_NAMES: dict[str, int | bool] = {
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": 5,
        "trace2": 4,
        "false": False,  # Special value to disable all logging
    }

    RESET: str = "\x1b[0m"

    # Level letter colors
    LEVEL_COLORS: dict[int, str] = {
        logging.ERROR: "\x1b[31m",
        logging.WARNING: "\x1b[33m",
        logging.INFO: "\x1b[32m",
        logging.DEBUG: "\x1b[36m",
    }
    TRACE_COLOR: str = "\x1b[90m"


for _name, _level in LogConstants.CUSTOM_LEVELS.items():
    logging.addLevelName(_level, _name)

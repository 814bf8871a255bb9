"""
Tests for the logging system.

Tests key functionality including:
- LogConfig level resolution and loading from configuration
- Logger extra fields and trace levels
- Derived "view" loggers sharing the root's handlers
- Formatter output with extra fields and colors
"""

import logging

import pytest

from mwselenium.log import (
    InvalidLogLevelError,
    LogConfig,
    LogConstants,
    LogFormatter,
    Logger,
    LoggerFactory,
    format_extra,
)

# =============================================================================
# LogConfig
# =============================================================================


@pytest.mark.unit
class TestLogConfig:
    """Test LogConfig."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("info", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("trace", 5),
            ("trace2", 4),
            ("20", 20),
            (30, 30),
            (False, False),
            (True, logging.INFO),
        ],
    )
    def test_level_resolution(self, level, expected):
        assert LogConfig.from_params(level).level == expected

    def test_invalid_level(self):
        with pytest.raises(InvalidLogLevelError):
            LogConfig.from_params("loud")

    def test_location_flag(self):
        assert LogConfig.from_params("info", location=True).location == 1
        assert LogConfig.from_params("info", location=False).location == 0
        assert LogConfig.from_params("info", location=2).location == 2

    def test_from_config(self):
        config = LogConfig.from_config(
            {"logging": {"level": "debug", "microseconds": True, "colors": False}}
        )

        assert config.level == logging.DEBUG
        assert config.micros is True
        assert config.colors is False

    def test_from_config_without_section(self):
        config = LogConfig.from_config({"browser": "firefox"})

        assert config.level == logging.INFO
        assert config.colors is True

    def test_from_config_nested_section(self):
        config = LogConfig.from_config({"ci": {"logging": {"level": "error"}}}, "ci.logging")
        assert config.level == logging.ERROR

    def test_frozen(self):
        with pytest.raises(AttributeError):
            LogConfig().level = logging.DEBUG


# =============================================================================
# Loggers
# =============================================================================


@pytest.mark.unit
class TestLogger:
    """Test Logger and LoggerFactory."""

    def test_create_writes_to_stdout(self, capsys):
        lg = LoggerFactory.create("/scenario", LogConfig.from_params("info", colors=False))

        lg.info("scenario started", extra={"browser": "firefox"})

        out = capsys.readouterr().out
        assert "[I] scenario started" in out
        assert "[browser:firefox]" in out
        assert out.rstrip().endswith("[/scenario]")

    def test_create_returns_existing(self, sample_log_config):
        first = LoggerFactory.create("/same", sample_log_config)
        assert LoggerFactory.create("/same", sample_log_config) is first

    def test_level_filters(self, capsys):
        lg = LoggerFactory.create("/quiet", LogConfig.from_params("warning", colors=False))

        lg.info("hidden")
        lg.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_disabled_logger(self, capsys):
        lg = LoggerFactory.create("/off", LogConfig.from_params(False))

        lg.error("hidden")

        assert not lg.isEnabledFor(logging.CRITICAL)
        assert capsys.readouterr().out == ""

    def test_trace_levels(self, capsys):
        lg = LoggerFactory.create("/verbose", LogConfig.from_params("trace2", colors=False))

        lg.trace("applied binding")
        lg.trace2("skipped binding")

        out = capsys.readouterr().out
        assert "[T] applied binding" in out
        assert "[T] skipped binding" in out

    def test_trace_hidden_at_debug(self, capsys):
        lg = LoggerFactory.create("/debug", LogConfig.from_params("debug", colors=False))

        lg.trace("applied binding")

        assert "applied binding" not in capsys.readouterr().out

    def test_constructor_extra_merged_with_call_extra(self, capsys):
        lg = LoggerFactory.create(
            "/extra", LogConfig.from_params("info", colors=False), extra={"run": 3, "browser": "x"}
        )

        lg.info("started", extra={"browser": "chrome"})

        out = capsys.readouterr().out
        assert "[browser:chrome] [run:3]" in out

    def test_default_logger_is_shared(self):
        lg = LoggerFactory.default()

        assert lg is LoggerFactory.default()
        assert lg.name == "/mwselenium"
        assert lg.get_level() == logging.WARNING

    def test_logger_without_config(self):
        assert Logger("plain").get_level() == logging.INFO


@pytest.mark.unit
class TestDerive:
    """Test derived loggers."""

    def test_name_and_root(self, sample_log_config):
        root = LoggerFactory.create_root(sample_log_config)

        lg = LoggerFactory.derive(root, "browser_factory")
        nested = LoggerFactory.derive(lg, ["users", "api"])

        assert lg.name == "/browser_factory"
        assert nested.name == "/browser_factory/users/api"
        assert nested._root_logger is root
        assert lg.handlers == []

    def test_derive_returns_existing(self, test_logger):
        assert LoggerFactory.derive(test_logger, "api") is LoggerFactory.derive(test_logger, "api")

    def test_writes_through_root_handlers(self, capsys):
        root = LoggerFactory.create_root(LogConfig.from_params("debug", colors=False))
        lg = LoggerFactory.derive(root, "browser_factory")

        lg.debug("created browser", extra={"browser": "firefox"})

        out = capsys.readouterr().out
        assert "created browser" in out
        assert "[/browser_factory]" in out

    def test_inherits_root_level(self, capsys):
        root = LoggerFactory.create_root(LogConfig.from_params("warning", colors=False))
        lg = LoggerFactory.derive(root, "users")

        lg.info("hidden")

        assert capsys.readouterr().out == ""


# =============================================================================
# Formatting
# =============================================================================


def make_record(level=logging.INFO, extra=None, name="/test"):
    record = logging.LogRecord(name, level, __file__, 42, "created browser", None, None)
    setattr(record, "__mws__extra", extra or {})
    return record


@pytest.mark.unit
class TestFormatter:
    """Test LogFormatter and format_extra()."""

    def test_format_extra_sorted(self):
        assert format_extra({"b": 2, "a": 1}) == "[a:1] [b:2]"

    def test_format_extra_empty(self):
        assert format_extra(None) == ""
        assert format_extra({}) == ""

    def test_format_extra_values(self):
        rendered = format_extra({"exception": ValueError("bad"), "options": ("a", "b")})
        assert rendered == "[exception:ValueError: bad] [options:a,b]"

    def test_extras_start_at_rule(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=False))

        line = formatter.format(make_record(extra={"browser": "firefox"}))

        assert line.index("[browser:firefox]") == LogConstants.DEFAULT_RULE_WIDTH
        assert line.endswith("[browser:firefox] [/test]")

    def test_colors(self):
        formatter = LogFormatter(LogConfig.from_params("info", colors=True))

        line = formatter.format(make_record(level=logging.ERROR))

        assert f"[{LogConstants.LEVEL_COLORS[logging.ERROR]}E{LogConstants.RESET}]" in line

    def test_location(self):
        formatter = LogFormatter(LogConfig.from_params("info", location=True, colors=False))

        line = formatter.format(make_record())

        assert line.endswith("[/test] [test_logging.py:42]")

    def test_micros(self):
        formatter = LogFormatter(LogConfig.from_params("info", micros=True, colors=False))

        timestamp = formatter.format(make_record()).split("]")[0]

        assert len(timestamp.split(",")[1]) == 6

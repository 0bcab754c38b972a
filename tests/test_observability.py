"""
Tests for logging setup and diagnostics.
"""

import logging
from pathlib import Path

import pytest

from swiftgen_plugin.core.diagnostics import Diagnostics
from swiftgen_plugin.core.observability.logging_config import (
    SeverityFormatter,
    parse_level,
    setup_logging,
    severity_name,
)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_console_level(self, restore_logging):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path, restore_logging):
        log_file = tmp_path / "plugin.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        logging.getLogger("swiftgen_plugin.test").debug("to file only")
        for handler in root.handlers:
            handler.flush()
        assert "to file only" in log_file.read_text()


class TestParseLevel:
    def test_names(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("ERROR") == logging.ERROR

    def test_fallback(self):
        assert parse_level(None) == logging.WARNING
        assert parse_level("chatty") == logging.WARNING


class TestDiagnostics:
    def test_records_and_logs(self, caplog):
        diagnostics = Diagnostics()
        with caplog.at_level(logging.INFO, logger="swiftgen_plugin.core.diagnostics"):
            diagnostics.warning("no config")
            diagnostics.error("broken")
            diagnostics.remark("fyi")
        assert [d.severity for d in diagnostics.entries] == ["warning", "error", "remark"]
        assert [d.message for d in diagnostics.warnings] == ["no config"]
        assert [d.message for d in diagnostics.errors] == ["broken"]
        assert "no config" in caplog.text
        assert diagnostics.entries[0].to_dict() == {"severity": "warning", "message": "no config"}


class TestSeverityFormatter:
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (logging.CRITICAL, "error"),
            (logging.ERROR, "error"),
            (logging.WARNING, "warning"),
            (logging.INFO, "remark"),
            (logging.DEBUG, "debug"),
        ],
    )
    def test_severity_name(self, level, expected):
        assert severity_name(level) == expected

    def test_minimal_format(self):
        formatter = SeverityFormatter("%(severity)s: %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "no config", None, None)
        assert formatter.format(record) == "warning: no config"

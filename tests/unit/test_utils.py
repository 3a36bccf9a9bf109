"""
Unit Tests for Logging and Exception Utilities
"""
import logging
import logging.handlers

import pytest

from bp_calculator.utils import BPCalculatorError, RangeViolation, get_logger, setup_logging
from bp_calculator.utils.logging import StructuredFormatter


class TestExceptions:

    def test_base_error_defaults(self):
        err = BPCalculatorError("boom")
        assert err.to_dict() == {"error": "UNKNOWN_ERROR", "message": "boom", "details": {}}

    def test_range_violation_is_base_error(self):
        err = RangeViolation("bad", field="diastolic", details={"value": 30})
        assert isinstance(err, BPCalculatorError)
        assert err.code == "RANGE_VIOLATION"
        assert err.details == {"field": "diastolic", "value": 30}
        assert str(err) == "bad"


class TestLogging:

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        yield
        setup_logging("INFO")

    @staticmethod
    def _owned_handlers():
        return [h for h in logging.getLogger().handlers if getattr(h, "_bp_calculator_handler", False)]

    def test_formatter_includes_level_and_name(self):
        record = logging.LogRecord("bp.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        output = StructuredFormatter().format(record)
        assert "WARNING" in output
        assert "[bp.test]" in output
        assert "hello world" in output
        assert "\033[" not in output

    def test_formatter_colour(self):
        record = logging.LogRecord("bp.test", logging.ERROR, __file__, 1, "boom", (), None)
        output = StructuredFormatter(use_color=True).format(record)
        assert output.startswith("\033[31m")
        assert output.endswith("\033[0m")

    def test_setup_logging_installs_daily_rotating_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.txt"
        setup_logging("DEBUG", str(log_file), backup_days=7)

        rotating = [
            h for h in self._owned_handlers()
            if isinstance(h, logging.handlers.TimedRotatingFileHandler)
        ]
        assert len(rotating) == 1
        assert rotating[0].when == "MIDNIGHT"
        assert rotating[0].backupCount == 7
        assert log_file.parent.is_dir()

        get_logger("bp.file").info("written to file")
        rotating[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_console_only_without_file(self):
        setup_logging("INFO")
        handlers = self._owned_handlers()
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path):
        setup_logging("INFO", str(tmp_path / "a.txt"))
        setup_logging("INFO", str(tmp_path / "b.txt"))
        assert len(self._owned_handlers()) == 2

    def test_foreign_handlers_survive_setup(self):
        foreign = logging.NullHandler()
        root = logging.getLogger()
        root.addHandler(foreign)
        try:
            setup_logging("INFO")
            assert foreign in root.handlers
        finally:
            root.removeHandler(foreign)

    def test_unknown_level_defaults_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_get_logger(self):
        assert get_logger("bp_calculator.x").name == "bp_calculator.x"

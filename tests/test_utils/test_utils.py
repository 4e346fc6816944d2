"""Tests for feasibility_engine.utils (math helpers, logging setup)."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from feasibility_engine.config import LoggingConfig
from feasibility_engine.models.response import Response
from feasibility_engine.scoring.engine import calculate_feasibility_score
from feasibility_engine.utils.logging import PACKAGE_LOGGER, _JsonFormatter, configure_logging
from feasibility_engine.utils.math_utils import clamp, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (12.4, 12), (12.5, 13), (13.5, 14), (99.5, 100), (0.49, 0), (24.999, 25)],
    )
    def test_values(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_bankers_rounding(self):
        assert round(12.5) == 12
        assert round_half_up(12.5) == 13


class TestClamp:
    def test_bounds(self):
        assert clamp(-5, 0, 100) == 0
        assert clamp(150, 0, 100) == 100
        assert clamp(42, 0, 100) == 42


class TestLogging:
    @pytest.fixture(autouse=True)
    def _restore_loggers(self):
        root = logging.getLogger()
        package = logging.getLogger(PACKAGE_LOGGER)
        handlers, level, package_level = list(root.handlers), root.level, package.level
        yield
        for h in root.handlers:
            if h not in handlers:
                h.close()
        root.handlers[:] = handlers
        root.setLevel(level)
        package.setLevel(package_level)

    def test_configure_sets_level(self):
        configure_logging(LoggingConfig(level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
        assert not logging.getLogger("feasibility_engine.scoring.engine").isEnabledFor(logging.INFO)

    def test_debug_lowers_only_the_package_logger(self):
        configure_logging(LoggingConfig(level="WARNING"), debug=True)
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("feasibility_engine.scoring.engine").isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("some.library").isEnabledFor(logging.INFO)

    def test_handlers_write_to_stderr(self):
        configure_logging(LoggingConfig())
        [console] = logging.getLogger().handlers
        assert console.stream is sys.stderr

    def test_file_handler_created(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        configure_logging(LoggingConfig(level="INFO", log_file=str(log_file)))
        logging.getLogger("feasibility_engine.test").info("hello file")
        for h in logging.getLogger().handlers:
            h.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_json_formatter_lifts_scoring_context(self):
        record = logging.LogRecord(
            "feasibility_engine.scoring", logging.INFO, __file__, 1,
            "score %d", (42,), None,
        )
        record.domain = "security"
        record.percentage = 42
        record.unrelated = "dropped"
        payload = json.loads(_JsonFormatter().format(record))
        assert payload == {
            "ts": payload["ts"],
            "level": "INFO",
            "logger": "feasibility_engine.scoring",
            "msg": "score 42",
            "domain": "security",
            "percentage": 42,
        }

    def test_engine_records_carry_context(self, yes_no_questions, caplog):
        responses = [Response.from_value(q.id, "yes") for q in yes_no_questions]
        with caplog.at_level(logging.INFO, logger="feasibility_engine.scoring.engine"):
            calculate_feasibility_score(responses, yes_no_questions)
        [record] = caplog.records
        payload = json.loads(_JsonFormatter().format(record))
        assert payload["overall_score"] == 100
        assert payload["rating"] == "high"
        assert payload["response_count"] == 5

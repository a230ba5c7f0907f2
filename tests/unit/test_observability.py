"""
Unit tests for structured logging and metrics.
"""

import io
import json

import pytest

from fieldguard.core.rules import Validator
from fieldguard.observability import metrics
from fieldguard.observability.logger import log_operation, setup_logger


def sample(name: str, labels: dict | None = None) -> float:
    return metrics.REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestMetrics:
    """Tests for engine metrics"""

    def test_registration_is_counted(self):
        before = sample("fieldguard_registrations_total", {"rule_kind": "zip"})

        Validator().register("zip", "zip", "12345")

        assert sample("fieldguard_registrations_total", {"rule_kind": "zip"}) == before + 1

    def test_evaluation_outcomes_are_counted(self):
        passed_before = sample("fieldguard_evaluations_total", {"outcome": "passed"})
        failed_before = sample("fieldguard_evaluations_total", {"outcome": "failed"})
        failures_before = sample("fieldguard_validation_failures_total")

        ok = Validator()
        ok.parse([("zip", "12345", "zip")])
        ok.run()

        bad = Validator()
        bad.parse([("zip", "12a", "zip")])
        bad.run()

        assert sample("fieldguard_evaluations_total", {"outcome": "passed"}) == passed_before + 1
        assert sample("fieldguard_evaluations_total", {"outcome": "failed"}) == failed_before + 1
        assert sample("fieldguard_validation_failures_total") == failures_before + 2

    def test_duration_is_observed(self):
        before = sample("fieldguard_evaluation_duration_seconds_count")

        validator = Validator()
        validator.parse([("name", "x", "required")])
        validator.run()

        assert sample("fieldguard_evaluation_duration_seconds_count") == before + 1

    def test_generate_metrics(self):
        assert b"fieldguard_evaluations_total" in metrics.generate_metrics()
        assert metrics.get_content_type().startswith("text/plain")


class TestLogger:
    """Tests for structured logging"""

    def test_json_format(self):
        stream = io.StringIO()
        logger = setup_logger("fieldguard.test.json", level="INFO", stream=stream)

        logger.info("Validation failed", extra={"failure_count": 3})

        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["message"] == "Validation failed"
        assert record["level"] == "INFO"
        assert record["logger"] == "fieldguard.test.json"
        assert record["failure_count"] == 3

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        logger = setup_logger("fieldguard.test.env", stream=io.StringIO())
        assert logger.level == 30

    def test_setup_replaces_handlers(self):
        """Test configuring a logger twice leaves a single handler"""
        setup_logger("fieldguard.test.reuse", stream=io.StringIO())
        logger = setup_logger("fieldguard.test.reuse", stream=io.StringIO())
        assert len(logger.handlers) == 1

    def test_log_operation_reraises(self):
        stream = io.StringIO()
        logger = setup_logger("fieldguard.test.op", level="INFO", stream=stream)

        with pytest.raises(RuntimeError):
            with log_operation("Validating fields", logger=logger, form="signup"):
                raise RuntimeError("boom")

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert lines[0]["message"] == "Starting: Validating fields"
        assert lines[-1]["status"] == "error"
        assert lines[-1]["error_type"] == "RuntimeError"
        assert lines[-1]["form"] == "signup"

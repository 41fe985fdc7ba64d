"""Tests for JSON logging setup."""
import json
import logging

import pytest

from euplatesc.observability import get_logger, setup_logging, with_operation_context


@pytest.fixture
def package_logger():
    logger = logging.getLogger("euplatesc")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_json_output_with_context(package_logger, capsys):
    setup_logging("INFO")

    get_logger("euplatesc.test").info(
        "refund sent", extra=with_operation_context(operation="refund", method="refund")
    )

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "refund sent"
    assert record["level"] == "INFO"
    assert record["logger"] == "euplatesc.test"
    assert record["operation"] == "refund"
    assert record["method"] == "refund"
    assert "timestamp" in record


def test_context_omitted_when_absent(package_logger, capsys):
    setup_logging("INFO")

    get_logger("euplatesc.test").info("plain")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert "operation" not in record
    assert "method" not in record


def test_with_operation_context_keeps_extra_fields():
    extra = with_operation_context(operation="capture", invoice_id="INV1")
    assert extra == {"operation": "capture", "invoice_id": "INV1"}

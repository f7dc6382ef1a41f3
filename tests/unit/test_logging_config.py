# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for logging configuration."""

import json
import logging
import uuid

from src.logging_config import JSONFormatter, setup_logging


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="src.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Billing period %s created",
        args=("Q2",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    billing_period_id = uuid.uuid4()
    output = json.loads(
        JSONFormatter().format(make_record(billing_period_id=billing_period_id))
    )
    assert output["level"] == "INFO"
    assert output["logger"] == "src.test"
    assert output["message"] == "Billing period Q2 created"
    assert output["billing_period_id"] == str(billing_period_id)
    assert "sales_person_id" not in output


def test_setup_logging():
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers, root.level
    try:
        setup_logging("debug", json_output=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)

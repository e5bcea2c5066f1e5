"""
Tests for structured logging setup
"""

import json
import logging
import re

import pytest
import structlog

from subtrack.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
)


@pytest.fixture
def restore_logging():
    yield
    clear_request_context()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def last_json_line(capsys) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


def test_generate_request_id_format_and_uniqueness():
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) > 90
    assert all(re.fullmatch(r"[0-9a-f]+-[0-9a-f]{4}", request_id) for request_id in ids)


def test_bind_and_clear_request_context():
    assert bind_request_context("req-123") == "req-123"
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_bind_request_context_generates_id():
    request_id = bind_request_context()
    try:
        assert request_id
        assert get_request_id() == request_id
    finally:
        clear_request_context()


def test_bind_request_context_drops_previous_fields():
    bind_request_context("req-1", graphql_operation="Categories")
    bind_request_context("req-2")
    try:
        assert structlog.contextvars.get_contextvars() == {"request_id": "req-2"}
    finally:
        clear_request_context()


def test_json_output_carries_request_context(capsys, restore_logging):
    structlog.reset_defaults()
    configure_logging(debug=False)
    logger = get_logger("subtrack.tests")

    bind_request_context("req-789", graphql_operation="mutation:AddSubscription")
    logger.info("Subscription added", subscription_id="42")

    record = last_json_line(capsys)
    assert record["event"] == "Subscription added"
    assert record["subscription_id"] == "42"
    assert record["request_id"] == "req-789"
    assert record["graphql_operation"] == "mutation:AddSubscription"
    assert record["level"] == "info"
    assert record["logger"] == "subtrack.tests"


def test_explicit_level_filters_lower_events(capsys, restore_logging):
    structlog.reset_defaults()
    configure_logging(debug=False, level="warning")
    logger = get_logger("subtrack.tests")

    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert logging.getLogger().level == logging.WARNING
    assert json.loads(out.strip().splitlines()[-1])["event"] == "shown"
    assert "hidden" not in out

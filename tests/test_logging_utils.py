import logging

from todo_api.logging_utils import (
    CorrelationFilter,
    request_id_var,
    reset_request_id,
    set_request_id,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("todo_api", logging.INFO, __file__, 1, "hello", None, None)


def test_correlation_filter_defaults_to_dash() -> None:
    record = _record()
    assert CorrelationFilter().filter(record) is True
    assert record.request_id == "-"


def test_correlation_filter_uses_current_request_id() -> None:
    token = set_request_id("req-42")
    try:
        record = _record()
        CorrelationFilter().filter(record)
        assert record.request_id == "req-42"
        assert request_id_var.get() == "req-42"
    finally:
        reset_request_id(token)
    assert request_id_var.get() is None

import logging

from argcheck.utils.logging import (
    CorrelationIdFilter,
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_generated_correlation_id_is_hex():
    token = set_correlation_id()
    assert len(token) == 32
    int(token, 16)


def test_get_logger_namespaces_under_package():
    logger = get_logger("tests.logging")
    assert logger.name == "argcheck.tests.logging"
    root = logging.getLogger("argcheck")
    assert any(
        isinstance(f, CorrelationIdFilter) for handler in root.handlers for f in handler.filters
    )


def test_configure_logging_is_idempotent():
    configure_logging()
    configure_logging()
    assert len(logging.getLogger("argcheck").handlers) == 1


def test_filter_stamps_records():
    set_correlation_id("stamp")
    record = logging.LogRecord("argcheck.x", logging.INFO, __file__, 1, "msg", None, None)
    assert CorrelationIdFilter().filter(record)
    assert record.correlation_id == "stamp"

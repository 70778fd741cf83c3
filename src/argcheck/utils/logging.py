"""Structured logging helpers for argcheck."""

from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

ROOT_LOGGER_NAME = "argcheck"

_correlation_id: ContextVar[str | None] = ContextVar("argcheck_correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    """
    Tag subsequent log records in this context, e.g. one id per parsed command line.
    """
    token = value or uuid.uuid4().hex
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid

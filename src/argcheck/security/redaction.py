"""Redaction helpers for option values that end up in logs or error messages."""

from __future__ import annotations

from typing import Any

REDACTED_VALUE = "***"

_SENSITIVE_KEY_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "access_key",
    "secret_key",
    "private_key",
    "privatekey",
    "credential",
    "auth",
)

_SENSITIVE_VALUE_TOKENS = (
    "password=",
    "passwd=",
    "secret=",
    "token=",
    "api_key=",
    "apikey=",
    "bearer ",
    "authorization:",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value if ch.isalnum())


def is_sensitive_key(key: str) -> bool:
    """
    Return ``True`` when an option name such as ``--db-password`` or
    ``apiKey`` looks like it carries a credential.
    """
    normalized = key.lower()
    compact = _compact(normalized)
    for token in _SENSITIVE_KEY_TOKENS:
        if token in normalized or _compact(token) in compact:
            return True
    return False


def is_sensitive_value(value: str) -> bool:
    normalized = value.lower()
    return any(token in normalized for token in _SENSITIVE_VALUE_TOKENS)


def redact_value(value: Any, *, key: str | None = None) -> Any:
    if key is not None and is_sensitive_key(str(key)):
        return REDACTED_VALUE
    if isinstance(value, dict):
        return {k: redact_value(v, key=str(k)) for k, v in value.items()}
    if isinstance(value, tuple):
        return tuple(redact_value(item) for item in value)
    if isinstance(value, list):
        return [redact_value(item) for item in value]
    if isinstance(value, str):
        if is_sensitive_value(value):
            return REDACTED_VALUE
        return value
    return value

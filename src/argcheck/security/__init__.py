"""Security helpers for argcheck."""

from .redaction import REDACTED_VALUE, is_sensitive_key, redact_value

__all__ = ["REDACTED_VALUE", "is_sensitive_key", "redact_value"]

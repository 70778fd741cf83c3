"""
Validation error hierarchy for argcheck.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..security.redaction import redact_value


class ValidationError(Exception):
    """
    Structured validation failure.

    ``context`` holds the failing ``validator`` and ``value`` and, for
    function validators, the ``original_error``. An optional ``option`` key
    names the option being validated and drives redaction when the error is
    rendered. ``program`` is the error reporter the validator was built with.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Mapping[str, Any]] = None,
        program: Any = None,
    ) -> None:
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})
        self.program = program
        super().__init__(self._format_message())

    @property
    def validator(self) -> Any:
        return self.context.get("validator")

    @property
    def value(self) -> Any:
        return self.context.get("value")

    @property
    def original_error(self) -> BaseException | None:
        return self.context.get("original_error")

    def _format_message(self) -> str:
        if "value" not in self.context:
            return self.message
        shown = redact_value(self.context["value"], key=self.context.get("option"))
        return f"{self.message} (value={shown!r})"


class ValidatorSetupError(ValidationError):
    """Raised or reported when a validator specification is malformed."""

"""
Value validator for command-line options.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..constants import FlagSpec, ValueKind
from ..security.redaction import redact_value
from ..utils.logging import get_logger
from .errors import ValidationError, ValidatorSetupError
from .numbers import is_number, parse_float, parse_int, stringify
from .specs import FlagValidatorSpec, FunctionSpec, RegexSpec, ValidatorSpec, resolve_spec

if TYPE_CHECKING:
    from ..program import ErrorReporter

logger = get_logger("validation")

_BOOL_RE = re.compile(r"true|false|yes|no|0|1", re.IGNORECASE)
# Only these exact spellings coerce to False; other accepted tokens are True.
_FALSE_TOKENS = {"0", "no", "false"}

DEFAULT_ARRAY_SEPARATOR = ","


class Validator:
    """
    Validate and coerce a single option value.

    ``spec`` is a compiled regular expression, a callable, or a bitmask of
    ``TypeFlag`` values (or an already resolved spec). A malformed spec is
    reported through ``program.fatal_error`` and never raised from here;
    ``validate`` on such a validator raises a plain ``ValidationError``.
    """

    def __init__(self, spec: Any, program: "ErrorReporter", *, option: Optional[str] = None) -> None:
        self._raw_spec = spec
        self._program = program
        self.option = option
        self.spec: ValidatorSpec | None = None
        self.setup_error: ValidatorSetupError | None = None

        try:
            self.spec = resolve_spec(spec)
        except ValidatorSetupError as exc:
            exc.program = program
            self.setup_error = exc
            program.fatal_error(exc)

    @property
    def is_configured(self) -> bool:
        return self.spec is not None

    @property
    def array_separator(self) -> str:
        config = getattr(self._program, "config", None)
        return getattr(config, "array_separator", DEFAULT_ARRAY_SEPARATOR)

    def validate(self, value: Any) -> Any:
        spec = self.spec
        if isinstance(spec, FunctionSpec):
            return self._validate_with_function(spec, value)
        if isinstance(spec, RegexSpec):
            return self._validate_with_regex(spec, value)
        if isinstance(spec, FlagValidatorSpec):
            return self._validate_with_flags(spec.form, value)
        raise self._error(
            "Validator is not configured",
            value,
            validator=self._raw_spec,
            original_error=self.setup_error,
        )

    # Kind-specific validation -------------------------------------------
    def _validate_with_function(self, spec: FunctionSpec, value: Any) -> Any:
        try:
            return spec.func(value)
        except Exception as exc:
            raise self._error(
                "Function validation failed",
                value,
                validator=spec.func,
                original_error=exc,
            ) from exc

    def _validate_with_regex(self, spec: RegexSpec, value: Any) -> Any:
        if spec.pattern.search(stringify(value)) is None:
            raise self._error("RegExp validation failed", value, validator=spec.pattern)
        return value

    def _validate_with_flags(self, form: FlagSpec, value: Any, unary: bool = False) -> Any:
        if form.is_array and not unary:
            return [self._validate_with_flags(form, item, unary=True) for item in self._split(value)]

        if form.kind is ValueKind.INTEGER:
            result = parse_int(value) if is_number(value) else None
            if result is None:
                raise self._error(f"Type ({form.label}) validation failed", value)
            return result
        if form.kind is ValueKind.FLOAT:
            result = parse_float(value)
            if result is None:
                raise self._error(f"Type ({form.label}) validation failed", value)
            return result
        if form.kind is ValueKind.BOOLEAN:
            if isinstance(value, bool):
                return value
            if _BOOL_RE.fullmatch(stringify(value)) is None:
                raise self._error(f"Type ({form.label}) validation failed", value)
            return not (isinstance(value, str) and value in _FALSE_TOKENS)
        return value

    def _split(self, value: Any) -> List[Any]:
        if isinstance(value, str):
            return value.split(self.array_separator)
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return list(value)
        raise self._error("Type (ARRAY) validation failed", value)

    # Helpers -------------------------------------------------------------
    def _error(self, message: str, value: Any, **context: Any) -> ValidationError:
        context.setdefault("validator", self._raw_spec)
        context["value"] = value
        if self.option is not None:
            context["option"] = self.option
        logger.debug(
            "%s for option %s: %r",
            message,
            self.option or "<unnamed>",
            redact_value(value, key=self.option),
        )
        return ValidationError(message, context, self._program)

    @staticmethod
    def is_number(value: Any) -> bool:
        return is_number(value)

    def __repr__(self) -> str:
        return f"Validator(spec={self._raw_spec!r}, option={self.option!r})"

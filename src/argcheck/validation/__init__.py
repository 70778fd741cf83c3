"""
Validation utilities exposed at the package level.
"""

from .errors import ValidationError, ValidatorSetupError
from .numbers import is_number, parse_float, parse_int
from .specs import FlagValidatorSpec, FunctionSpec, RegexSpec, resolve_spec
from .validator import Validator

__all__ = [
    "ValidationError",
    "ValidatorSetupError",
    "Validator",
    "FlagValidatorSpec",
    "FunctionSpec",
    "RegexSpec",
    "resolve_spec",
    "is_number",
    "parse_float",
    "parse_int",
]

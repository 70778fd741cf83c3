"""
argcheck public package initialization.

Validation and coercion of raw command-line option values.
"""

from .constants import FlagSpec, TypeFlag, ValueKind  # noqa: F401
from .program import ConfigurationError, ErrorReporter, Program, ProgramConfig  # noqa: F401
from .validation import ValidationError, Validator, ValidatorSetupError  # noqa: F401

INT = TypeFlag.INT
FLOAT = TypeFlag.FLOAT
BOOL = TypeFlag.BOOL
STRING = TypeFlag.STRING
ARRAY = TypeFlag.ARRAY

__all__ = [
    "TypeFlag",
    "ValueKind",
    "FlagSpec",
    "INT",
    "FLOAT",
    "BOOL",
    "STRING",
    "ARRAY",
    "Program",
    "ProgramConfig",
    "ConfigurationError",
    "ErrorReporter",
    "Validator",
    "ValidationError",
    "ValidatorSetupError",
]

"""
Tagged validator specifications.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from ..constants import FlagSpec, has_known_flag
from .errors import ValidatorSetupError

INVALID_FLAG_SETUP = "Setup error - Invalid flag validator setup."
INVALID_SETUP = "Setup error - Invalid validator setup."


@dataclass(frozen=True)
class RegexSpec:
    pattern: re.Pattern


@dataclass(frozen=True)
class FunctionSpec:
    func: Callable[[Any], Any]


@dataclass(frozen=True)
class FlagValidatorSpec:
    flags: int
    form: FlagSpec = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "form", FlagSpec.from_flags(self.flags))


ValidatorSpec = Union[RegexSpec, FunctionSpec, FlagValidatorSpec]


def is_numeric_spec(raw: Any) -> bool:
    return isinstance(raw, int) and not isinstance(raw, bool)


def resolve_spec(raw: Any) -> ValidatorSpec:
    """
    Map a raw spec (compiled pattern, callable or flag bitmask) to its tagged form.

    Raises ``ValidatorSetupError`` when ``raw`` is none of those, or when a
    bitmask carries no known type flag.
    """
    if isinstance(raw, FlagValidatorSpec):
        if not has_known_flag(raw.flags):
            raise ValidatorSetupError(INVALID_FLAG_SETUP, {"validator": raw.flags})
        return raw
    if isinstance(raw, (RegexSpec, FunctionSpec)):
        return raw
    if is_numeric_spec(raw):
        if not has_known_flag(raw):
            raise ValidatorSetupError(INVALID_FLAG_SETUP, {"validator": raw})
        return FlagValidatorSpec(flags=int(raw))
    if isinstance(raw, re.Pattern):
        return RegexSpec(pattern=raw)
    if callable(raw):
        return FunctionSpec(func=raw)
    raise ValidatorSetupError(INVALID_SETUP, {"validator": raw})

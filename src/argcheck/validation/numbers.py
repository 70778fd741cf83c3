"""
Loose numeric parsing for command-line values.

Parsing reads the longest numeric prefix and ignores whatever follows, so
``"42abc"`` is a number and ``"abc42"`` is not. Existing scripts pass values
like ``"10px"`` and rely on this.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX_RE = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_INT_PREFIX_RE = re.compile(r"[+-]?[0-9]+")


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _is_native_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_float(value: Any) -> float | None:
    """
    Return the float prefix of ``value`` or ``None`` when there is none.
    """
    if _is_native_number(value):
        result = float(value)
        return None if math.isnan(result) else result
    match = _FLOAT_PREFIX_RE.match(stringify(value).lstrip())
    if match is None:
        return None
    return float(match.group(0))


def parse_int(value: Any) -> int | None:
    """
    Return the base-10 integer prefix of ``value`` or ``None``.

    Native numbers are truncated toward zero; infinities have no integer form.
    """
    if _is_native_number(value):
        if not math.isfinite(value):
            return None
        return int(value)
    match = _INT_PREFIX_RE.match(stringify(value).lstrip())
    if match is None:
        return None
    return int(match.group(0))


def is_number(value: Any) -> bool:
    return parse_float(value) is not None

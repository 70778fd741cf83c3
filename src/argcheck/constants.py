"""
Type flags used by flag validators.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TypeFlag(enum.IntFlag):
    INT = 1
    FLOAT = 2
    BOOL = 4
    STRING = 8
    ARRAY = 16

    INTEGER = INT
    BOOLEAN = BOOL
    LIST = ARRAY


KNOWN_FLAGS = TypeFlag.INT | TypeFlag.FLOAT | TypeFlag.BOOL | TypeFlag.STRING | TypeFlag.ARRAY


class ValueKind(enum.Enum):
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    PASSTHROUGH = "passthrough"


# Leaf kinds in precedence order; the first flag present wins.
_LEAF_PRECEDENCE = (
    (TypeFlag.INT, ValueKind.INTEGER),
    (TypeFlag.FLOAT, ValueKind.FLOAT),
    (TypeFlag.BOOL, ValueKind.BOOLEAN),
)


def has_known_flag(flags: int) -> bool:
    return (int(flags) & KNOWN_FLAGS) != 0


@dataclass(frozen=True)
class FlagSpec:
    """
    Explicit form of a flag bitmask: one leaf kind, optionally wrapped in an array.
    """

    kind: ValueKind
    is_array: bool = False

    @classmethod
    def from_flags(cls, flags: int) -> "FlagSpec":
        mask = int(flags)
        kind = ValueKind.PASSTHROUGH
        for flag, candidate in _LEAF_PRECEDENCE:
            if mask & flag:
                kind = candidate
                break
        return cls(kind=kind, is_array=bool(mask & TypeFlag.ARRAY))

    @property
    def label(self) -> str:
        """Type name used in ``Type (<label>) validation failed`` messages."""
        if self.kind is ValueKind.PASSTHROUGH and self.is_array:
            return "ARRAY"
        return {
            ValueKind.INTEGER: "INT",
            ValueKind.FLOAT: "FLOAT",
            ValueKind.BOOLEAN: "BOOL",
            ValueKind.PASSTHROUGH: "STRING",
        }[self.kind]

import re

import pytest

from argcheck import ARRAY, BOOL, FLOAT, INT, STRING, FlagSpec, TypeFlag, ValueKind
from argcheck.validation import (
    FlagValidatorSpec,
    FunctionSpec,
    RegexSpec,
    ValidatorSetupError,
    is_number,
    parse_float,
    parse_int,
    resolve_spec,
)


def test_type_flags_are_bit_disjoint():
    flags = [TypeFlag.INT, TypeFlag.FLOAT, TypeFlag.BOOL, TypeFlag.STRING, TypeFlag.ARRAY]
    combined = 0
    for flag in flags:
        assert combined & flag == 0
        combined |= flag


def test_flag_aliases():
    assert TypeFlag.INTEGER is TypeFlag.INT
    assert TypeFlag.BOOLEAN is TypeFlag.BOOL
    assert TypeFlag.LIST is TypeFlag.ARRAY


@pytest.mark.parametrize(
    "flags, kind, is_array",
    [
        (INT, ValueKind.INTEGER, False),
        (FLOAT | ARRAY, ValueKind.FLOAT, True),
        (BOOL, ValueKind.BOOLEAN, False),
        (INT | FLOAT, ValueKind.INTEGER, False),
        (FLOAT | BOOL, ValueKind.FLOAT, False),
        (ARRAY, ValueKind.PASSTHROUGH, True),
        (STRING, ValueKind.PASSTHROUGH, False),
    ],
)
def test_flag_spec_from_flags(flags, kind, is_array):
    form = FlagSpec.from_flags(flags)
    assert form.kind is kind
    assert form.is_array is is_array


def test_flag_spec_label():
    assert FlagSpec.from_flags(INT | ARRAY).label == "INT"
    assert FlagSpec.from_flags(ARRAY).label == "ARRAY"
    assert FlagSpec.from_flags(STRING).label == "STRING"
    assert FlagSpec.from_flags(FLOAT | BOOL).label == "FLOAT"


@pytest.mark.parametrize("value", ["42", "42abc", " 7", "-3.5", ".5", "1e10", "Infinity", 0, 2.5])
def test_is_number_accepts_numeric_prefixes(value):
    assert is_number(value)


@pytest.mark.parametrize("value", ["abc", "", "  ", "abc42", "+", "e5", True, None, float("nan")])
def test_is_number_rejects_values_without_prefix(value):
    assert not is_number(value)


def test_parse_int_truncates():
    assert parse_int("3.7") == 3
    assert parse_int("-3.7") == -3
    assert parse_int(-3.7) == -3
    assert parse_int("0x1A") == 0
    assert parse_int("x") is None


def test_parse_float_reads_longest_prefix():
    assert parse_float("1.5e2px") == 150.0
    assert parse_float("5.") == 5.0
    assert parse_float("1e") == 1.0
    assert parse_float("-Infinity") == float("-inf")


def test_resolve_spec_variants():
    pattern = re.compile("a")
    assert resolve_spec(pattern) == RegexSpec(pattern=pattern)
    assert resolve_spec(len) == FunctionSpec(func=len)
    resolved = resolve_spec(INT | ARRAY)
    assert isinstance(resolved, FlagValidatorSpec)
    assert resolved.form == FlagSpec(kind=ValueKind.INTEGER, is_array=True)


def test_resolve_spec_rejects_garbage():
    with pytest.raises(ValidatorSetupError, match="Invalid validator setup"):
        resolve_spec("a+")
    with pytest.raises(ValidatorSetupError, match="Invalid flag validator setup"):
        resolve_spec(1024)

import struct

import pytest

from rucmeta.common import CompOp, Condition, SetClause, TabCol, Value
from rucmeta.defs import ColType
from rucmeta.errors import InternalError, InvalidColLengthError, StringOverflowError


def test_tabcol_ordering_by_table_then_column():
    cols = [TabCol("b", "a"), TabCol("a", "z"), TabCol("a", "b")]
    assert sorted(cols) == [TabCol("a", "b"), TabCol("a", "z"), TabCol("b", "a")]


def test_value_constructors_set_type():
    assert Value.from_int(5).type is ColType.INT
    assert Value.from_float(2.5).type is ColType.FLOAT
    assert Value.from_str("x").type is ColType.STRING
    assert Value.from_str("x").value == "x"


def test_int_raw_round_trip():
    value = Value.from_int(-42)
    raw = value.init_raw(4)
    assert value.raw == raw
    assert struct.unpack("<i", raw)[0] == -42


def test_float_raw_round_trip():
    value = Value.from_float(1.5)
    raw = value.init_raw(4)
    assert struct.unpack("<f", raw)[0] == value.value


def test_string_raw_padded_with_zeros():
    value = Value.from_str("ab")
    raw = value.init_raw(5)
    assert len(raw) == 5
    assert raw.rstrip(b"\x00") == b"ab"
    assert raw[2:] == bytes(3)


def test_string_exact_length_fits():
    assert Value.from_str("abc").init_raw(3) == b"abc"


def test_string_overflow():
    with pytest.raises(StringOverflowError):
        Value.from_str("toolong").init_raw(3)


def test_int_wrong_length():
    with pytest.raises(InvalidColLengthError):
        Value.from_int(1).init_raw(8)


def test_init_raw_twice_fails():
    value = Value.from_int(1)
    value.init_raw(4)
    with pytest.raises(InternalError):
        value.init_raw(4)


def test_int_out_of_range():
    with pytest.raises(struct.error):
        Value.from_int(2**40)


def test_condition_and_set_clause_hold_parts():
    lhs = TabCol("t", "a")
    cond = Condition(lhs, CompOp.LE, True, rhs_val=Value.from_int(3))
    assert cond.rhs_val.value == 3
    assert cond.rhs_col is None
    clause = SetClause(lhs, Value.from_str("v"))
    assert clause.lhs == TabCol("t", "a")
    assert clause.rhs.value == "v"
"""Values, column references, conditions and set clauses used by queries."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

from .defs import ColType
from .errors import InternalError, InvalidColLengthError, StringOverflowError

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


@dataclass(frozen=True, order=True)
class TabCol:
    """A column qualified by its table; ordered by (table, column)."""

    tab_name: str
    col_name: str


@dataclass
class Value:
    """A typed literal, optionally encoded into a fixed-length raw buffer."""

    type: ColType
    value: int | float | str
    raw: bytes | None = None

    @classmethod
    def from_int(cls, value: int) -> Value:
        _INT.pack(value)
        return cls(ColType.INT, int(value))

    @classmethod
    def from_float(cls, value: float) -> Value:
        (stored,) = _FLOAT.unpack(_FLOAT.pack(value))
        return cls(ColType.FLOAT, stored)

    @classmethod
    def from_str(cls, value: str) -> Value:
        return cls(ColType.STRING, value)

    def init_raw(self, length: int) -> bytes:
        """Encode the value into ``length`` bytes and keep it in ``raw``."""
        if self.raw is not None:
            raise InternalError("raw buffer already initialised")
        if self.type is ColType.INT:
            if length != _INT.size:
                raise InvalidColLengthError(length)
            self.raw = _INT.pack(self.value)
        elif self.type is ColType.FLOAT:
            if length != _FLOAT.size:
                raise InvalidColLengthError(length)
            self.raw = _FLOAT.pack(self.value)
        else:
            encoded = str(self.value).encode("utf-8")
            if length < len(encoded):
                raise StringOverflowError()
            self.raw = encoded.ljust(length, b"\x00")
        return self.raw


class CompOp(Enum):
    EQ = 0
    NE = 1
    LT = 2
    GT = 3
    LE = 4
    GE = 5


@dataclass
class Condition:
    """``lhs_col op rhs``, where rhs is either a column or a value."""

    lhs_col: TabCol
    op: CompOp
    is_rhs_val: bool
    rhs_col: TabCol | None = None
    rhs_val: Value | None = None


@dataclass
class SetClause:
    lhs: TabCol
    rhs: Value
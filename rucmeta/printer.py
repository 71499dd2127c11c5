"""Per-statement context and the tabular result printer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from .defs import BUFFER_LENGTH
from .txn import Transaction

RECORD_COUNT_LENGTH = 40
COL_WIDTH = 16


@dataclass
class Context:
    """State shared by one statement: managers, transaction and reply buffer."""

    lock_mgr: Any = None
    log_mgr: Any = None
    txn: Transaction | None = None
    data_send: bytearray = field(default_factory=bytearray)
    ellipsis: bool = False

    @property
    def offset(self) -> int:
        return len(self.data_send)

    def output(self) -> str:
        return self.data_send.decode("utf-8", errors="replace")


def _emit(context: Context, chunk: bytes, *, mark_ellipsis: bool = True) -> None:
    """Append ``chunk`` if room remains; otherwise switch to ellipsis mode."""
    if not context.ellipsis and context.offset + RECORD_COUNT_LENGTH + len(chunk) < BUFFER_LENGTH:
        context.data_send += chunk
    elif mark_ellipsis:
        context.ellipsis = True


class RecordPrinter:
    """Writes rows as a fixed-width ASCII table into a context's reply buffer."""

    def __init__(self, num_cols: int) -> None:
        if num_cols <= 0:
            raise ValueError("a record printer needs at least one column")
        self.num_cols = num_cols

    def print_separator(self, context: Context) -> None:
        cell = b"+" + b"-" * (COL_WIDTH + 2)
        for _ in range(self.num_cols):
            _emit(context, cell)
        _emit(context, b"+\n")

    def print_record(self, rec_str: Sequence[str], context: Context) -> None:
        if len(rec_str) != self.num_cols:
            raise ValueError(f"expected {self.num_cols} columns, got {len(rec_str)}")
        for col in rec_str:
            data = col.encode("utf-8")
            if len(data) > COL_WIDTH:
                data = data[: COL_WIDTH - 3] + b"..."
            _emit(context, b"| " + data.rjust(COL_WIDTH) + b" ")
        _emit(context, b"|\n", mark_ellipsis=False)

    @staticmethod
    def print_record_count(num_rec: int, context: Context) -> None:
        text = "... ...\n" if context.ellipsis else ""
        text += f"Total record(s): {num_rec}\n"
        context.data_send += text.encode("utf-8")
"""Database, table, column and index metadata with its text format."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .defs import ColType
from .errors import ColumnNotFoundError, IndexNotFoundError, TableNotFoundError


class _Tokens:
    """Whitespace-separated reader over a metadata text."""

    def __init__(self, text: str) -> None:
        self._it = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ValueError("unexpected end of metadata") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer in metadata, got {token!r}") from None

    def flag(self) -> bool:
        value = self.integer()
        if value not in (0, 1):
            raise ValueError(f"expected 0 or 1 in metadata, got {value}")
        return bool(value)


@dataclass
class ColMeta:
    """A column: owning table, name, type, byte length and offset in the record."""

    tab_name: str
    name: str
    type: ColType
    len: int
    offset: int
    index: bool = False

    def __str__(self) -> str:
        return (
            f"{self.tab_name} {self.name} {int(self.type)} "
            f"{self.len} {self.offset} {int(self.index)}"
        )

    @classmethod
    def _parse(cls, tokens: _Tokens) -> ColMeta:
        tab_name = tokens.word()
        name = tokens.word()
        col_type = ColType(tokens.integer())
        length = tokens.integer()
        offset = tokens.integer()
        index = tokens.flag()
        return cls(tab_name, name, col_type, length, offset, index)


@dataclass
class IndexMeta:
    """An index over one or more columns of a table."""

    tab_name: str
    col_tot_len: int
    col_num: int
    cols: list[ColMeta] = field(default_factory=list)

    def __str__(self) -> str:
        head = f"{self.tab_name} {self.col_tot_len} {self.col_num}"
        return head + "".join(f"\n{col}" for col in self.cols)

    @classmethod
    def _parse(cls, tokens: _Tokens) -> IndexMeta:
        tab_name = tokens.word()
        col_tot_len = tokens.integer()
        col_num = tokens.integer()
        cols = [ColMeta._parse(tokens) for _ in range(col_num)]
        return cls(tab_name, col_tot_len, col_num, cols)

    def _covers(self, col_names: Sequence[str]) -> bool:
        return self.col_num == len(col_names) and [c.name for c in self.cols] == list(col_names)


@dataclass
class TabMeta:
    """A table: its columns and the indexes built on it."""

    name: str = ""
    cols: list[ColMeta] = field(default_factory=list)
    indexes: list[IndexMeta] = field(default_factory=list)

    def is_col(self, col_name: str) -> bool:
        return any(col.name == col_name for col in self.cols)

    def is_index(self, col_names: Sequence[str]) -> bool:
        return any(index._covers(col_names) for index in self.indexes)

    def get_index_meta(self, col_names: Sequence[str]) -> IndexMeta:
        for index in self.indexes:
            if index._covers(col_names):
                return index
        raise IndexNotFoundError(self.name, col_names)

    def get_col(self, col_name: str) -> ColMeta:
        for col in self.cols:
            if col.name == col_name:
                return col
        raise ColumnNotFoundError(col_name)

    def __str__(self) -> str:
        parts = [f"{self.name}\n{len(self.cols)}\n"]
        parts.extend(f"{col}\n" for col in self.cols)
        parts.append(f"{len(self.indexes)}\n")
        parts.extend(f"{index}\n" for index in self.indexes)
        return "".join(parts)

    @classmethod
    def _parse(cls, tokens: _Tokens) -> TabMeta:
        name = tokens.word()
        cols = [ColMeta._parse(tokens) for _ in range(tokens.integer())]
        indexes = [IndexMeta._parse(tokens) for _ in range(tokens.integer())]
        return cls(name, cols, indexes)


@dataclass
class DbMeta:
    """A database: its name and its tables, written out in table-name order."""

    name: str = ""
    tabs: dict[str, TabMeta] = field(default_factory=dict)

    def is_table(self, tab_name: str) -> bool:
        return tab_name in self.tabs

    def set_table(self, tab_name: str, meta: TabMeta) -> None:
        self.tabs[tab_name] = meta

    def get_table(self, tab_name: str) -> TabMeta:
        try:
            return self.tabs[tab_name]
        except KeyError:
            raise TableNotFoundError(tab_name) from None

    def dumps(self) -> str:
        """Render the metadata in the on-disk text format."""
        body = "".join(f"{self.tabs[key]}\n" for key in sorted(self.tabs))
        return f"{self.name}\n{len(self.tabs)}\n{body}"

    @classmethod
    def loads(cls, text: str) -> DbMeta:
        """Parse the on-disk text format; raises ValueError on malformed input."""
        tokens = _Tokens(text)
        db = cls(tokens.word())
        for _ in range(tokens.integer()):
            tab = TabMeta._parse(tokens)
            db.tabs[tab.name] = tab
        return db
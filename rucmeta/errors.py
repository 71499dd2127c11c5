"""Exception hierarchy for the storage and query layers."""

from __future__ import annotations

import os
from collections.abc import Iterable


class RMDBError(Exception):
    """Base error; its message always starts with ``Error: ``."""

    def __init__(self, msg: str = "") -> None:
        self.msg = "Error: " + msg
        super().__init__(self.msg)

    def __str__(self) -> str:
        return self.msg


class InternalError(RMDBError):
    pass


class UnixError(RMDBError):
    """An operating-system call failed."""

    def __init__(self, errno: int | None = None) -> None:
        self.errno = errno
        super().__init__(os.strerror(errno) if errno is not None else "Unknown error")


class FileNotOpenError(RMDBError):
    def __init__(self, fd: int) -> None:
        self.fd = fd
        super().__init__(f"Invalid file descriptor: {fd}")


class FileNotClosedError(RMDBError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("File is opened: " + filename)


class FileAlreadyExistsError(RMDBError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("File already exists: " + filename)


class MissingFileError(RMDBError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("File not found: " + filename)


class RecordNotFoundError(RMDBError):
    def __init__(self, page_no: int, slot_no: int) -> None:
        self.page_no = page_no
        self.slot_no = slot_no
        super().__init__(f"Record not found: ({page_no},{slot_no})")


class InvalidRecordSizeError(RMDBError):
    def __init__(self, record_size: int) -> None:
        self.record_size = record_size
        super().__init__(f"Invalid record size: {record_size}")


class InvalidColLengthError(RMDBError):
    def __init__(self, col_len: int) -> None:
        self.col_len = col_len
        super().__init__(f"Invalid column length: {col_len}")


class IndexEntryNotFoundError(RMDBError):
    def __init__(self) -> None:
        super().__init__("Index entry not found")


class DatabaseNotFoundError(RMDBError):
    def __init__(self, db_name: str) -> None:
        self.db_name = db_name
        super().__init__("Database not found: " + db_name)


class DatabaseExistsError(RMDBError):
    def __init__(self, db_name: str) -> None:
        self.db_name = db_name
        super().__init__("Database already exists: " + db_name)


class TableNotFoundError(RMDBError):
    def __init__(self, tab_name: str) -> None:
        self.tab_name = tab_name
        super().__init__("Table not found: " + tab_name)


class TableExistsError(RMDBError):
    def __init__(self, tab_name: str) -> None:
        self.tab_name = tab_name
        super().__init__("Table already exists: " + tab_name)


class ColumnNotFoundError(RMDBError):
    def __init__(self, col_name: str) -> None:
        self.col_name = col_name
        super().__init__("Column not found: " + col_name)


def _index_label(tab_name: str, col_names: Iterable[str]) -> str:
    return f"{tab_name}.({', '.join(col_names)})"


class IndexNotFoundError(RMDBError):
    def __init__(self, tab_name: str, col_names: Iterable[str]) -> None:
        self.tab_name = tab_name
        self.col_names = list(col_names)
        super().__init__("Index not found: " + _index_label(tab_name, self.col_names))


class IndexExistsError(RMDBError):
    def __init__(self, tab_name: str, col_names: Iterable[str]) -> None:
        self.tab_name = tab_name
        self.col_names = list(col_names)
        super().__init__("Index already exists: " + _index_label(tab_name, self.col_names))


class InvalidValueCountError(RMDBError):
    def __init__(self) -> None:
        super().__init__("Invalid value count")


class StringOverflowError(RMDBError):
    def __init__(self) -> None:
        super().__init__("String is too long")


class IncompatibleTypeError(RMDBError):
    def __init__(self, lhs: str, rhs: str) -> None:
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"Incompatible type error: lhs {lhs}, rhs {rhs}")


class AmbiguousColumnError(RMDBError):
    def __init__(self, col_name: str) -> None:
        self.col_name = col_name
        super().__init__("Ambiguous column: " + col_name)


class PageNotExistError(RMDBError):
    def __init__(self, table_name: str, page_no: int) -> None:
        self.table_name = table_name
        self.page_no = page_no
        super().__init__(f"Page {page_no} in table {table_name}not exits")
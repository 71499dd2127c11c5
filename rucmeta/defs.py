"""Core identifiers, column types and storage constants."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import IntEnum

BUFFER_LENGTH = 8192

INVALID_FRAME_ID = -1
INVALID_PAGE_ID = -1
INVALID_TXN_ID = -1
INVALID_TIMESTAMP = -1
INVALID_LSN = -1
HEADER_PAGE_ID = 0
PAGE_SIZE = 4096
BUFFER_POOL_SIZE = 65536
LOG_BUFFER_SIZE = 1024 * PAGE_SIZE
BUCKET_SIZE = 50

LOG_FILE_NAME = "db.log"
REPLACER_TYPE = "LRU"
DB_META_NAME = "db.meta"


@dataclass(frozen=True)
class Rid:
    """Location of a record: page number and slot number."""

    page_no: int
    slot_no: int


class ColType(IntEnum):
    """Column data types; the integer value is what metadata files store."""

    INT = 0
    FLOAT = 1
    STRING = 2


_COLTYPE_NAMES = {
    ColType.INT: "INT",
    ColType.FLOAT: "FLOAT",
    ColType.STRING: "STRING",
}


def coltype_to_str(col_type: ColType | int) -> str:
    """Return the display name of a column type.

    Raises KeyError for a value that is not a known column type.
    """
    try:
        return _COLTYPE_NAMES[ColType(col_type)]
    except ValueError:
        raise KeyError(col_type) from None


class RecScan(abc.ABC):
    """Cursor over record identifiers."""

    @abc.abstractmethod
    def next(self) -> None:
        """Advance to the next record."""

    @abc.abstractmethod
    def is_end(self) -> bool:
        """Whether the scan is exhausted."""

    @abc.abstractmethod
    def rid(self) -> Rid:
        """Identifier of the current record."""
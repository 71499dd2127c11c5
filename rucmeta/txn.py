"""Transaction state, write records, lock identifiers and abort errors."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from .defs import INVALID_LSN, INVALID_TIMESTAMP, Rid


class TransactionState(Enum):
    DEFAULT = 0
    GROWING = 1
    SHRINKING = 2
    COMMITTED = 3
    ABORTED = 4


class IsolationLevel(Enum):
    READ_UNCOMMITTED = 0
    REPEATABLE_READ = 1
    READ_COMMITTED = 2
    SERIALIZABLE = 3


class WType(Enum):
    INSERT_TUPLE = 0
    DELETE_TUPLE = 1
    UPDATE_TUPLE = 2


@dataclass
class WriteRecord:
    """One write of a transaction, kept for rollback.

    Inserts carry no record image; deletes and updates carry the old record.
    """

    wtype: WType
    tab_name: str
    rid: Rid
    record: bytes | None = None


class LockDataType(IntEnum):
    TABLE = 0
    RECORD = 1


_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class LockDataId:
    """Identifies a lockable object: a whole table or one record of it."""

    fd: int
    rid: Rid
    type: LockDataType

    @classmethod
    def table(cls, fd: int) -> LockDataId:
        return cls(fd, Rid(-1, -1), LockDataType.TABLE)

    @classmethod
    def record(cls, fd: int, rid: Rid) -> LockDataId:
        return cls(fd, rid, LockDataType.RECORD)

    def key(self) -> int:
        """Pack the identifier into a signed 64-bit integer."""
        if self.type is LockDataType.TABLE:
            return self.fd
        packed = (
            (int(self.type) << 63)
            | (self.fd << 31)
            | (self.rid.page_no << 16)
            | self.rid.slot_no
        ) & _MASK64
        return packed - (1 << 64) if packed >> 63 else packed

    def __hash__(self) -> int:
        return hash(self.key())


class AbortReason(Enum):
    LOCK_ON_SHIRINKING = 0
    UPGRADE_CONFLICT = 1
    DEADLOCK_PREVENTION = 2


_ABORT_TEXT = {
    AbortReason.LOCK_ON_SHIRINKING: "aborted because it cannot request locks on SHRINKING phase",
    AbortReason.UPGRADE_CONFLICT: "aborted because another transaction is waiting for upgrading",
    AbortReason.DEADLOCK_PREVENTION: "aborted for deadlock prevention",
}


class TransactionAbortError(Exception):
    """Raised when a transaction must be rolled back."""

    def __init__(self, txn_id: int, abort_reason: AbortReason) -> None:
        self.txn_id = txn_id
        self.abort_reason = abort_reason
        super().__init__(self.info().rstrip("\n"))

    def info(self) -> str:
        text = _ABORT_TEXT.get(self.abort_reason)
        if text is None:
            return "Transaction aborted\n"
        return f"Transaction {self.txn_id} {text}\n"


@dataclass(eq=False)
class Transaction:
    """A transaction and the resources it holds."""

    txn_id: int
    isolation_level: IsolationLevel = IsolationLevel.SERIALIZABLE
    state: TransactionState = TransactionState.DEFAULT
    txn_mode: bool = False
    start_ts: int = INVALID_TIMESTAMP
    prev_lsn: int = INVALID_LSN
    thread_id: int = field(default_factory=threading.get_ident)
    write_set: deque[WriteRecord] = field(default_factory=deque)
    lock_set: set[LockDataId] = field(default_factory=set)
    index_latch_page_set: deque[Any] = field(default_factory=deque)
    index_deleted_page_set: deque[Any] = field(default_factory=deque)

    def append_write_record(self, write_record: WriteRecord) -> None:
        self.write_set.append(write_record)

    def append_index_deleted_page(self, page: Any) -> None:
        self.index_deleted_page_set.append(page)

    def append_index_latch_page(self, page: Any) -> None:
        self.index_latch_page_set.append(page)
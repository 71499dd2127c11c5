"""Registry of running transactions and the concurrency-control mode."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, ClassVar

from .defs import INVALID_TXN_ID
from .errors import InternalError
from .txn import Transaction


class ConcurrencyMode(Enum):
    TWO_PHASE_LOCKING = 0
    BASIC_TO = 1


class TransactionManager:
    """Hands out transactions and looks them up in the global transaction table."""

    txn_map: ClassVar[dict[int, Transaction]] = {}

    def __init__(
        self,
        lock_manager: Any,
        sm_manager: Any,
        concurrency_mode: ConcurrencyMode = ConcurrencyMode.TWO_PHASE_LOCKING,
    ) -> None:
        self.lock_manager = lock_manager
        self.sm_manager = sm_manager
        self.concurrency_mode = concurrency_mode
        self.next_txn_id = 0
        self.next_timestamp = 0
        self._latch = threading.Lock()

    def get_transaction(self, txn_id: int) -> Transaction | None:
        """Return the transaction with that id, or None for the invalid id.

        The transaction must be registered and belong to the calling thread.
        """
        if txn_id == INVALID_TXN_ID:
            return None
        with self._latch:
            txn = TransactionManager.txn_map.get(txn_id)
        if txn is None:
            raise InternalError(f"transaction {txn_id} is not registered")
        if txn.thread_id != threading.get_ident():
            raise InternalError(f"transaction {txn_id} belongs to another thread")
        return txn
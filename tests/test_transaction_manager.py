import threading

import pytest

from rucmeta.defs import INVALID_TXN_ID
from rucmeta.errors import InternalError
from rucmeta.transaction_manager import ConcurrencyMode, TransactionManager
from rucmeta.txn import Transaction


@pytest.fixture
def tm():
    TransactionManager.txn_map.clear()
    yield TransactionManager(None, None)
    TransactionManager.txn_map.clear()


def test_default_mode_is_two_phase_locking(tm):
    assert tm.concurrency_mode is ConcurrencyMode.TWO_PHASE_LOCKING
    other = TransactionManager(None, None, ConcurrencyMode.BASIC_TO)
    assert other.concurrency_mode is ConcurrencyMode.BASIC_TO


def test_invalid_id_returns_none(tm):
    assert tm.get_transaction(INVALID_TXN_ID) is None


def test_registered_transaction_is_returned(tm):
    txn = Transaction(3)
    TransactionManager.txn_map[3] = txn
    assert tm.get_transaction(3) is txn


def test_missing_transaction_raises(tm):
    with pytest.raises(InternalError):
        tm.get_transaction(42)


def test_transaction_of_other_thread_raises(tm):
    holder = {}

    def make():
        holder["txn"] = Transaction(5)

    worker = threading.Thread(target=make)
    worker.start()
    worker.join()
    TransactionManager.txn_map[5] = holder["txn"]
    with pytest.raises(InternalError):
        tm.get_transaction(5)


def test_map_is_shared_between_managers(tm):
    txn = Transaction(7)
    TransactionManager.txn_map[7] = txn
    other = TransactionManager(None, None)
    assert other.get_transaction(7) is tm.get_transaction(7)
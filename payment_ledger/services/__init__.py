"""Ledger services."""

from payment_ledger.services.record_store import (
    TransactionRecordStore,
    InMemoryTransactionStore,
)
from payment_ledger.services.ledger_engine import LedgerEngine
from payment_ledger.services.router import ShardedLedger
from payment_ledger.services.factory import build_ledger

__all__ = [
    "TransactionRecordStore",
    "InMemoryTransactionStore",
    "LedgerEngine",
    "ShardedLedger",
    "build_ledger",
]

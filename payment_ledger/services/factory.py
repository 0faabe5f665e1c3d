"""
Builds the ledger described by the application settings.
"""

from datetime import timedelta

from payment_ledger.config import Settings
from payment_ledger.logging_config import get_logger
from payment_ledger.services.ledger_engine import LedgerEngine
from payment_ledger.services.record_store import (
    InMemoryTransactionStore,
    TransactionRecordStore,
)
from payment_ledger.services.router import ShardedLedger

logger = get_logger("services.factory")

RECORD_STORES = ("memory", "database")


def build_record_store(
    settings: Settings, backend: str | None = None
) -> TransactionRecordStore:
    """Create the record store of the chosen backend."""
    backend = backend or settings.RECORD_STORE
    if backend == "memory":
        return InMemoryTransactionStore()
    if backend != "database":
        raise ValueError(
            f"Unknown record store '{backend}', expected one of {RECORD_STORES}"
        )

    # Imported here so the in-memory path never touches the database
    from payment_ledger.models.base import Base, SessionLocal, engine
    from payment_ledger.services.sql_record_store import SqlTransactionRecordStore

    Base.metadata.create_all(bind=engine)
    retention = (
        timedelta(days=settings.RECORD_RETENTION_DAYS)
        if settings.RECORD_RETENTION_DAYS > 0
        else None
    )
    store = SqlTransactionRecordStore(SessionLocal(), retention=retention)
    store.purge_expired()
    return store


def build_ledger(
    settings: Settings,
    backend: str | None = None,
    shard_count: int | None = None,
) -> LedgerEngine | ShardedLedger:
    """
    Create a single engine, or a ShardedLedger when more than one
    shard is configured. Shards share one record store so that a
    transaction id is never accepted twice.
    """
    shard_count = shard_count or settings.SHARD_COUNT
    records = build_record_store(settings, backend)
    logger.info(
        "Building ledger: store=%s shards=%d",
        backend or settings.RECORD_STORE,
        shard_count,
    )
    if shard_count == 1:
        return LedgerEngine(records)
    return ShardedLedger(shard_count, records)

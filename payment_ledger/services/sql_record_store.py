"""
Database-backed transaction record store.

Keeps records in the transaction_records table instead of process
memory. With a retention window, records older than the window can
no longer be disputed: get() and the mark_* methods treat them as
missing, and purge_expired() deletes them.

The store takes a database session as a constructor argument and
only flushes. The caller controls the transaction boundary through
commit().
"""

from datetime import datetime, timedelta
from typing import Callable

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from payment_ledger.exceptions import DuplicateTransactionError, InvalidTransitionError
from payment_ledger.logging_config import get_logger
from payment_ledger.models.enums import DisputeStatus
from payment_ledger.models.stored_transaction import StoredTransaction
from payment_ledger.models.transaction_record import TransactionRecord, VALID_TRANSITIONS
from payment_ledger.services.record_store import TransactionRecordStore

logger = get_logger("services.sql_record_store")


class SqlTransactionRecordStore(TransactionRecordStore):

    def __init__(
        self,
        db: Session,
        retention: timedelta | None = None,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.db = db
        self.retention = retention
        self.clock = clock

    def _cutoff(self) -> datetime | None:
        if self.retention is None:
            return None
        return self.clock() - self.retention

    def _load(self, transaction_id: int) -> StoredTransaction | None:
        """Return the row for an id, or None if missing or expired."""
        row = self.db.get(StoredTransaction, transaction_id)
        if row is None:
            return None
        cutoff = self._cutoff()
        if cutoff is not None and row.created_at < cutoff:
            return None
        return row

    def put(self, record: TransactionRecord) -> None:
        if record.transaction_id in self:
            raise DuplicateTransactionError(record.transaction_id)
        self.db.add(StoredTransaction.from_record(record, self.clock()))
        self.db.flush()

    def get(self, transaction_id: int) -> TransactionRecord | None:
        row = self._load(transaction_id)
        return row.to_record() if row is not None else None

    def _set_status(
        self, transaction_id: int, target: DisputeStatus
    ) -> TransactionRecord:
        row = self._load(transaction_id)
        if row is None:
            raise InvalidTransitionError(transaction_id, None, target)
        if target not in VALID_TRANSITIONS[row.status]:
            raise InvalidTransitionError(transaction_id, row.status, target)
        row.status = target
        self.db.flush()
        return row.to_record()

    def purge_expired(self) -> int:
        """Delete records older than the retention window. Returns the count."""
        cutoff = self._cutoff()
        if cutoff is None:
            return 0
        result = self.db.execute(
            delete(StoredTransaction).where(StoredTransaction.created_at < cutoff)
        )
        self.db.flush()
        if result.rowcount:
            logger.info("Purged %d expired transaction records", result.rowcount)
        return result.rowcount

    def __contains__(self, transaction_id: int) -> bool:
        # Expired rows still count: an id is never reused.
        return self.db.get(StoredTransaction, transaction_id) is not None

    def __len__(self) -> int:
        query = select(func.count()).select_from(StoredTransaction)
        cutoff = self._cutoff()
        if cutoff is not None:
            query = query.where(StoredTransaction.created_at >= cutoff)
        return self.db.execute(query).scalar_one()

    def commit(self) -> None:
        self.db.commit()

"""
Transaction record store.

The ledger engine keeps every applied deposit and withdrawal so a
later dispute can find the original amount. It only talks to the
TransactionRecordStore interface, so the in-memory store used here
can be swapped for a persisted, time-bounded one
(see sql_record_store.py) without touching the engine.
"""

from abc import ABC, abstractmethod

from payment_ledger.exceptions import DuplicateTransactionError, InvalidTransitionError
from payment_ledger.models.enums import DisputeStatus
from payment_ledger.models.transaction_record import TransactionRecord, VALID_TRANSITIONS


class TransactionRecordStore(ABC):
    """
    Lookup of deposit and withdrawal records by transaction id.

    put() rejects an id that was already used. The mark_* methods
    move a record through its dispute lifecycle and raise
    InvalidTransitionError when the record is missing or its
    current status does not allow the move.
    """

    @abstractmethod
    def put(self, record: TransactionRecord) -> None:
        ...

    @abstractmethod
    def get(self, transaction_id: int) -> TransactionRecord | None:
        ...

    @abstractmethod
    def _set_status(
        self, transaction_id: int, target: DisputeStatus
    ) -> TransactionRecord:
        """Move a record to target, enforcing VALID_TRANSITIONS."""

    @abstractmethod
    def __contains__(self, transaction_id: int) -> bool:
        """Whether the id was ever used, even if its record has expired."""

    @abstractmethod
    def __len__(self) -> int:
        ...

    def mark_disputed(self, transaction_id: int) -> TransactionRecord:
        return self._set_status(transaction_id, DisputeStatus.DISPUTED)

    def mark_resolved(self, transaction_id: int) -> TransactionRecord:
        return self._set_status(transaction_id, DisputeStatus.NONE)

    def mark_charged_back(self, transaction_id: int) -> TransactionRecord:
        return self._set_status(transaction_id, DisputeStatus.CHARGED_BACK)

    def commit(self) -> None:
        """Make changes durable. Nothing to do for stores without storage."""


class InMemoryTransactionStore(TransactionRecordStore):
    """Dict-backed store. Records live for the lifetime of the process."""

    def __init__(self):
        self._records: dict[int, TransactionRecord] = {}

    def put(self, record: TransactionRecord) -> None:
        if record.transaction_id in self._records:
            raise DuplicateTransactionError(record.transaction_id)
        self._records[record.transaction_id] = record

    def get(self, transaction_id: int) -> TransactionRecord | None:
        return self._records.get(transaction_id)

    def _set_status(
        self, transaction_id: int, target: DisputeStatus
    ) -> TransactionRecord:
        record = self._records.get(transaction_id)
        if record is None:
            raise InvalidTransitionError(transaction_id, None, target)
        if target not in VALID_TRANSITIONS[record.status]:
            raise InvalidTransitionError(transaction_id, record.status, target)
        record.status = target
        return record

    def __contains__(self, transaction_id: int) -> bool:
        return transaction_id in self._records

    def __len__(self) -> int:
        return len(self._records)

"""
Domain and database models.

All database models must be imported here so that Alembic can
discover them through Base.metadata when generating migrations.
"""

from payment_ledger.models.base import Base
from payment_ledger.models.enums import (
    EventType,
    TransactionKind,
    DisputeStatus,
    SkipReason,
)
from payment_ledger.models.money import Money
from payment_ledger.models.account import Account, AccountSnapshot
from payment_ledger.models.transaction_record import (
    TransactionRecord,
    VALID_TRANSITIONS,
)
from payment_ledger.models.stored_transaction import StoredTransaction

__all__ = [
    "Base",
    "EventType",
    "TransactionKind",
    "DisputeStatus",
    "SkipReason",
    "Money",
    "Account",
    "AccountSnapshot",
    "TransactionRecord",
    "VALID_TRANSITIONS",
    "StoredTransaction",
]

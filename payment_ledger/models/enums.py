"""
Shared enumerations.

String-valued enums so the same values are used in CSV input,
JSON bodies and database columns.
"""

import enum


class EventType(str, enum.Enum):
    """The kinds of event found in the input stream."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


class TransactionKind(str, enum.Enum):
    """Events that create a transaction record."""
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class DisputeStatus(str, enum.Enum):
    """Dispute lifecycle of a recorded transaction."""
    NONE = "NONE"
    DISPUTED = "DISPUTED"
    CHARGED_BACK = "CHARGED_BACK"


class SkipReason(str, enum.Enum):
    """Why the ledger engine dropped an event without effect."""
    ACCOUNT_LOCKED = "ACCOUNT_LOCKED"
    DUPLICATE_TRANSACTION = "DUPLICATE_TRANSACTION"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    UNKNOWN_TRANSACTION = "UNKNOWN_TRANSACTION"
    CLIENT_MISMATCH = "CLIENT_MISMATCH"
    INVALID_TRANSITION = "INVALID_TRANSITION"

"""
Typed exceptions for the payment ledger.

    LedgerError (base)
    |
    +-- FormatError                 malformed monetary text
    +-- DuplicateTransactionError   transaction id already used
    +-- InsufficientFundsError      withdrawal larger than available funds
    +-- InvalidTransitionError      dispute status does not allow the change

FormatError is raised to whoever called Money.parse. The other three
are policy signals: the ledger engine catches them and skips the
offending event, so they never reach the snapshot or the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_ledger.models.enums import DisputeStatus
    from payment_ledger.models.money import Money


class LedgerError(Exception):
    """Base class for all payment ledger errors."""

    code: str = "LEDGER_ERROR"


class FormatError(LedgerError, ValueError):
    """Monetary text is not a decimal with at most four fractional digits."""

    code = "INVALID_AMOUNT_FORMAT"

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid amount {text!r}: {reason}")


class DuplicateTransactionError(LedgerError):
    code = "DUPLICATE_TRANSACTION"

    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} already exists")


class InsufficientFundsError(LedgerError):
    code = "INSUFFICIENT_FUNDS"

    def __init__(self, client_id: int, available: Money, requested: Money):
        self.client_id = client_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient funds for client {client_id}: "
            f"available={available}, requested={requested}"
        )


class InvalidTransitionError(LedgerError):
    code = "INVALID_TRANSITION"

    def __init__(
        self,
        transaction_id: int,
        current: DisputeStatus | None,
        target: DisputeStatus,
    ):
        self.transaction_id = transaction_id
        self.current = current
        self.target = target
        current_name = current.value if current is not None else "MISSING"
        super().__init__(
            f"Cannot move transaction {transaction_id} "
            f"from {current_name} to {target.value}"
        )

"""
Transaction record.

A record is kept for every applied deposit and withdrawal so that
later dispute, resolve and chargeback events can find the original
amount. Dispute-flow events never create records; they only move a
record through its dispute status.
"""

from dataclasses import dataclass

from payment_ledger.models.enums import DisputeStatus, TransactionKind
from payment_ledger.models.money import Money


# Valid status transitions — the source of truth for the dispute lifecycle
VALID_TRANSITIONS: dict[DisputeStatus, set[DisputeStatus]] = {
    DisputeStatus.NONE: {DisputeStatus.DISPUTED},
    DisputeStatus.DISPUTED: {DisputeStatus.NONE, DisputeStatus.CHARGED_BACK},
    DisputeStatus.CHARGED_BACK: set(),  # Terminal state — no transitions out
}


@dataclass
class TransactionRecord:
    transaction_id: int
    client_id: int
    kind: TransactionKind
    amount: Money
    status: DisputeStatus = DisputeStatus.NONE

    def can_transition_to(self, new_status: DisputeStatus) -> bool:
        """Check if a status transition is valid."""
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    def __repr__(self) -> str:
        return (
            f"<TransactionRecord {self.transaction_id} {self.kind.value} "
            f"{self.amount} client={self.client_id} ({self.status.value})>"
        )

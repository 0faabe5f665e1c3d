"""
Pydantic schemas for account snapshots and engine diagnostics.
"""

from pydantic import BaseModel

from payment_ledger.models.account import AccountSnapshot
from payment_ledger.models.enums import SkipReason


class AccountResponse(BaseModel):
    client: int
    available: str
    held: str
    total: str
    locked: bool

    @classmethod
    def from_snapshot(cls, snapshot: AccountSnapshot) -> "AccountResponse":
        return cls(
            client=snapshot.client_id,
            available=snapshot.available.to_display_text(),
            held=snapshot.held.to_display_text(),
            total=snapshot.total.to_display_text(),
            locked=snapshot.locked,
        )


class SkippedEventsResponse(BaseModel):
    total: int
    by_reason: dict[SkipReason, int]

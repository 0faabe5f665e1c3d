"""Pydantic schemas for events in and account snapshots out."""

from payment_ledger.schemas.event import TransactionEvent
from payment_ledger.schemas.account import AccountResponse, SkippedEventsResponse

__all__ = ["TransactionEvent", "AccountResponse", "SkippedEventsResponse"]

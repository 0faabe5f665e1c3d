"""
Event API endpoints.

Posting an event never fails because of ledger rules: an event the
ledger rejects is skipped exactly as it would be in a CSV stream,
and the response shows the unchanged account. Only a body that does
not validate is refused (422).
"""

from collections import Counter

from fastapi import APIRouter, Depends

from payment_ledger.api.dependencies import get_ledger, ledger_lock
from payment_ledger.models.enums import SkipReason
from payment_ledger.schemas.account import AccountResponse, SkippedEventsResponse
from payment_ledger.schemas.event import TransactionEvent

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("", response_model=AccountResponse, status_code=201)
def apply_event(
    event: TransactionEvent,
    ledger=Depends(get_ledger),
):
    """Apply one event and return the client's account afterwards."""
    with ledger_lock:
        ledger.apply(event)
        ledger.commit()
        snapshot = ledger.get_account(event.client)
    return AccountResponse.from_snapshot(snapshot)


@router.get("/skipped", response_model=SkippedEventsResponse)
def skipped_events(ledger=Depends(get_ledger)):
    """Count of skipped events per reason."""
    with ledger_lock:
        skipped = Counter(ledger.skipped)
    return SkippedEventsResponse(
        total=sum(skipped.values()),
        by_reason={reason: skipped.get(reason, 0) for reason in SkipReason},
    )

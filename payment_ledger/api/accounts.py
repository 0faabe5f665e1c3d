"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from payment_ledger.api.dependencies import get_ledger, ledger_lock
from payment_ledger.schemas.account import AccountResponse

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(ledger=Depends(get_ledger)):
    """Snapshot of every account, ordered by client id."""
    with ledger_lock:
        rows = ledger.snapshot()
    return [AccountResponse.from_snapshot(row) for row in rows]


@router.get("/{client_id}", response_model=AccountResponse)
def get_account(client_id: int, ledger=Depends(get_ledger)):
    """Get one client's account."""
    with ledger_lock:
        snapshot = ledger.get_account(client_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail=f"Client {client_id} not found")
    return AccountResponse.from_snapshot(snapshot)

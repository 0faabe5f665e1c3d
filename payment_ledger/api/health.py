"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from payment_ledger.api.dependencies import get_ledger, ledger_lock
from payment_ledger.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(ledger=Depends(get_ledger)):
    """Return application health status and the record store in use."""
    with ledger_lock:
        accounts = len(ledger.snapshot())
    return {
        "status": "healthy",
        "service": "payment-ledger",
        "record_store": get_settings().RECORD_STORE,
        "accounts": accounts,
    }

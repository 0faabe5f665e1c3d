"""
Payment Ledger — FastAPI Application.

HTTP front end to the same ledger the CLI drives.
All routers are registered here.
"""

from fastapi import FastAPI

from payment_ledger.config import get_settings
from payment_ledger.logging_config import configure_logging
from payment_ledger.api.health import router as health_router
from payment_ledger.api.events import router as events_router
from payment_ledger.api.accounts import router as accounts_router

settings = get_settings()
configure_logging(level=settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Applies payment events to client accounts",
)

# Register routers
app.include_router(health_router)
app.include_router(events_router)
app.include_router(accounts_router)

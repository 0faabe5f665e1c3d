"""
Shared FastAPI dependencies.

The API serves one process-wide ledger. FastAPI runs plain `def`
endpoints in a threadpool, while the ledger (and a database record
store's session) is single-threaded, so every endpoint touches the
ledger only while holding ledger_lock. Tests override get_ledger
to hand each test a fresh engine.
"""

import threading
from functools import lru_cache

from payment_ledger.config import get_settings
from payment_ledger.services.factory import build_ledger
from payment_ledger.services.ledger_engine import LedgerEngine
from payment_ledger.services.router import ShardedLedger

ledger_lock = threading.Lock()


@lru_cache()
def get_ledger() -> LedgerEngine | ShardedLedger:
    """Return the process-wide ledger, built on first use."""
    return build_ledger(get_settings())

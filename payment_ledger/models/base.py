"""
Database engine, session factory, and base model.

Only the database-backed transaction record store uses these.
The in-memory store and the ledger engine never touch a database.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from payment_ledger.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them, which
# handles a database that restarted or a connection that went stale.
# SQLite connections default to their creating thread; the API shares
# one session across its worker threads under ledger_lock.
connect_args = (
    {"check_same_thread": False}
    if settings.DATABASE_URL.startswith("sqlite")
    else {}
)
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# --- Session Factory ---
# autocommit=False: the caller decides when records are committed.
# autoflush=False: SQL is only sent on an explicit flush or commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


# --- Base Model Class ---
class Base(DeclarativeBase):
    pass

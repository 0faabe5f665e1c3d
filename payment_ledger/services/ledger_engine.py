"""
Ledger engine — applies transaction events to client accounts.

The engine owns every Account and the transaction record store.
Events are applied one at a time, each fully before the next.

Rules:
1. An account is created the first time any event names its client
2. A locked account ignores every later event
3. Deposits and withdrawals create a record; an id is never reused
4. A withdrawal larger than the available funds is ignored
5. Dispute, resolve and chargeback move an existing record through
   NONE -> DISPUTED -> NONE | CHARGED_BACK, and only for the client
   that owns the record

An event that breaks a rule is skipped: no balance changes, no
record changes, no error for the caller. Skips are logged at DEBUG
and counted in `skipped` so they can be inspected afterwards.
"""

from collections import Counter
from typing import Iterable

from payment_ledger.exceptions import (
    DuplicateTransactionError,
    InsufficientFundsError,
    InvalidTransitionError,
)
from payment_ledger.logging_config import get_logger
from payment_ledger.models.account import Account, AccountSnapshot
from payment_ledger.models.enums import EventType, SkipReason, TransactionKind
from payment_ledger.models.transaction_record import TransactionRecord
from payment_ledger.schemas.event import TransactionEvent
from payment_ledger.services.record_store import (
    InMemoryTransactionStore,
    TransactionRecordStore,
)

logger = get_logger("services.ledger_engine")


class LedgerEngine:
    """
    Single-threaded ledger over one ordered event stream.

    The record store is a constructor argument, so the caller picks
    between the in-memory store and a persisted one.
    """

    def __init__(self, records: TransactionRecordStore | None = None):
        self.records = records if records is not None else InMemoryTransactionStore()
        self.accounts: dict[int, Account] = {}
        self.skipped: Counter[SkipReason] = Counter()
        self._handlers = {
            EventType.DEPOSIT: self._deposit,
            EventType.WITHDRAWAL: self._withdraw,
            EventType.DISPUTE: self._dispute,
            EventType.RESOLVE: self._resolve,
            EventType.CHARGEBACK: self._chargeback,
        }

    def apply(self, event: TransactionEvent) -> None:
        """Apply one event. Never raises for a rejected event."""
        account = self._get_or_create_account(event.client)
        if account.locked:
            self._skip(event, SkipReason.ACCOUNT_LOCKED)
            return

        try:
            self._handlers[event.type](event, account)
        except DuplicateTransactionError:
            self._skip(event, SkipReason.DUPLICATE_TRANSACTION)
        except InsufficientFundsError:
            self._skip(event, SkipReason.INSUFFICIENT_FUNDS)
        except InvalidTransitionError:
            self._skip(event, SkipReason.INVALID_TRANSITION)

    def apply_all(self, events: Iterable[TransactionEvent]) -> None:
        for event in events:
            self.apply(event)

    def snapshot(self) -> list[AccountSnapshot]:
        """Return every account, ordered by client id."""
        return [
            AccountSnapshot.from_account(self.accounts[client_id])
            for client_id in sorted(self.accounts)
        ]

    def get_account(self, client_id: int) -> AccountSnapshot | None:
        account = self.accounts.get(client_id)
        return AccountSnapshot.from_account(account) if account else None

    def commit(self) -> None:
        self.records.commit()

    # --- Event handlers ---

    def _deposit(self, event: TransactionEvent, account: Account) -> None:
        self._ensure_unused(event.tx)
        account.credit(event.amount)
        self.records.put(TransactionRecord(
            transaction_id=event.tx,
            client_id=event.client,
            kind=TransactionKind.DEPOSIT,
            amount=event.amount,
        ))

    def _withdraw(self, event: TransactionEvent, account: Account) -> None:
        self._ensure_unused(event.tx)
        account.debit(event.amount)
        self.records.put(TransactionRecord(
            transaction_id=event.tx,
            client_id=event.client,
            kind=TransactionKind.WITHDRAWAL,
            amount=event.amount,
        ))

    def _dispute(self, event: TransactionEvent, account: Account) -> None:
        record = self._find_record(event)
        if record is None:
            return
        # Status first: a rejected transition leaves the balances alone
        self.records.mark_disputed(event.tx)
        account.hold(record.amount)

    def _resolve(self, event: TransactionEvent, account: Account) -> None:
        record = self._find_record(event)
        if record is None:
            return
        self.records.mark_resolved(event.tx)
        account.release_hold(record.amount)

    def _chargeback(self, event: TransactionEvent, account: Account) -> None:
        record = self._find_record(event)
        if record is None:
            return
        self.records.mark_charged_back(event.tx)
        account.chargeback(record.amount)

    # --- Helpers ---

    def _get_or_create_account(self, client_id: int) -> Account:
        account = self.accounts.get(client_id)
        if account is None:
            account = Account(client_id=client_id)
            self.accounts[client_id] = account
        return account

    def _ensure_unused(self, transaction_id: int) -> None:
        """Reject a reused id before any balance is touched."""
        if transaction_id in self.records:
            raise DuplicateTransactionError(transaction_id)

    def _find_record(self, event: TransactionEvent) -> TransactionRecord | None:
        """Look up the record a dispute-flow event refers to."""
        record = self.records.get(event.tx)
        if record is None:
            self._skip(event, SkipReason.UNKNOWN_TRANSACTION)
            return None
        if record.client_id != event.client:
            self._skip(event, SkipReason.CLIENT_MISMATCH)
            return None
        return record

    def _skip(self, event: TransactionEvent, reason: SkipReason) -> None:
        self.skipped[reason] += 1
        logger.debug("Skipped %s: %s", event, reason.value)

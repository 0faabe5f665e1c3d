"""
Client sharding across independent ledger engines.

No balance rule ever spans two clients, so each client can live in
its own engine. ShardedLedger sends every event to the engine chosen
by the client id. Transaction ids are unique across all clients, so
every engine checks them against one shared record store.
"""

from collections import Counter
from typing import Iterable

from payment_ledger.models.account import AccountSnapshot
from payment_ledger.models.enums import SkipReason
from payment_ledger.schemas.event import TransactionEvent
from payment_ledger.services.ledger_engine import LedgerEngine
from payment_ledger.services.record_store import (
    InMemoryTransactionStore,
    TransactionRecordStore,
)


class ShardedLedger:
    """Same interface as LedgerEngine, spread over shard_count engines."""

    def __init__(
        self,
        shard_count: int,
        records: TransactionRecordStore | None = None,
    ):
        if shard_count < 1:
            raise ValueError(f"shard_count must be at least 1, got {shard_count}")
        self.records = records if records is not None else InMemoryTransactionStore()
        self.engines = [LedgerEngine(self.records) for _ in range(shard_count)]

    def engine_for(self, client_id: int) -> LedgerEngine:
        return self.engines[client_id % len(self.engines)]

    def apply(self, event: TransactionEvent) -> None:
        self.engine_for(event.client).apply(event)

    def apply_all(self, events: Iterable[TransactionEvent]) -> None:
        for event in events:
            self.apply(event)

    def snapshot(self) -> list[AccountSnapshot]:
        rows = [row for engine in self.engines for row in engine.snapshot()]
        return sorted(rows, key=lambda row: row.client_id)

    def get_account(self, client_id: int) -> AccountSnapshot | None:
        return self.engine_for(client_id).get_account(client_id)

    @property
    def skipped(self) -> Counter[SkipReason]:
        total: Counter[SkipReason] = Counter()
        for engine in self.engines:
            total.update(engine.skipped)
        return total

    def commit(self) -> None:
        self.records.commit()

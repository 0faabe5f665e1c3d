"""
Tests for ShardedLedger and the ledger factory.
"""

import pytest

from builders import chargeback, deposit, dispute, withdrawal
from payment_ledger.config import Settings
from payment_ledger.models.enums import SkipReason
from payment_ledger.models.money import Money
from payment_ledger.services.factory import build_ledger, build_record_store
from payment_ledger.services.ledger_engine import LedgerEngine
from payment_ledger.services.record_store import InMemoryTransactionStore
from payment_ledger.services.router import ShardedLedger


STREAM = [
    deposit(1, 1, "10"),
    deposit(2, 2, "20"),
    deposit(3, 3, "30"),
    withdrawal(2, 4, "25"),
    dispute(3, 3),
    chargeback(3, 3),
    deposit(4, 5, "4.5"),
    withdrawal(1, 6, "2.5"),
]


class TestShardedLedger:

    def test_clients_routed_by_id(self):
        ledger = ShardedLedger(3)
        assert ledger.engine_for(4) is ledger.engines[1]
        assert ledger.engine_for(6) is ledger.engines[0]

    def test_same_result_as_single_engine(self):
        single = LedgerEngine()
        sharded = ShardedLedger(3)
        single.apply_all(STREAM)
        sharded.apply_all(STREAM)
        assert sharded.snapshot() == single.snapshot()

    def test_snapshot_merged_in_client_order(self):
        ledger = ShardedLedger(2)
        ledger.apply_all(STREAM)
        assert [row.client_id for row in ledger.snapshot()] == [1, 2, 3, 4]

    def test_each_client_lives_in_one_engine(self):
        ledger = ShardedLedger(2)
        ledger.apply_all(STREAM)
        assert ledger.engines[0].get_account(2) is not None
        assert ledger.engines[1].get_account(2) is None

    def test_skipped_counts_are_summed(self):
        ledger = ShardedLedger(2)
        ledger.apply_all(STREAM)
        ledger.apply(deposit(3, 7, "1"))
        assert ledger.skipped[SkipReason.INSUFFICIENT_FUNDS] == 1
        assert ledger.skipped[SkipReason.ACCOUNT_LOCKED] == 1

    def test_get_account(self):
        ledger = ShardedLedger(4)
        ledger.apply(deposit(7, 1, "1"))
        assert ledger.get_account(7).client_id == 7
        assert ledger.get_account(8) is None

    def test_transaction_id_reused_on_other_shard_is_ignored(self):
        ledger = ShardedLedger(2)
        ledger.apply(deposit(1, 1, "10"))
        ledger.apply(deposit(2, 1, "10"))

        assert ledger.engine_for(1) is not ledger.engine_for(2)
        assert ledger.get_account(2).total == Money.zero()
        assert ledger.skipped[SkipReason.DUPLICATE_TRANSACTION] == 1

    def test_reused_ids_match_single_engine(self):
        stream = STREAM + [
            deposit(2, 1, "99"),
            withdrawal(3, 2, "1"),
            deposit(4, 3, "5"),
        ]
        single = LedgerEngine()
        sharded = ShardedLedger(3)
        single.apply_all(stream)
        sharded.apply_all(stream)
        assert sharded.snapshot() == single.snapshot()

    def test_engines_share_one_record_store(self):
        ledger = ShardedLedger(3)
        assert all(engine.records is ledger.records for engine in ledger.engines)

    def test_shard_count_must_be_positive(self):
        with pytest.raises(ValueError, match="at least 1"):
            ShardedLedger(0)


class TestBuildLedger:

    def test_single_shard_builds_engine(self):
        ledger = build_ledger(Settings(), backend="memory", shard_count=1)
        assert isinstance(ledger, LedgerEngine)
        assert isinstance(ledger.records, InMemoryTransactionStore)

    def test_several_shards_build_router(self):
        ledger = build_ledger(Settings(), backend="memory", shard_count=3)
        assert isinstance(ledger, ShardedLedger)
        assert len(ledger.engines) == 3
        assert isinstance(ledger.records, InMemoryTransactionStore)

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError, match="Unknown record store"):
            build_record_store(Settings(), "redis")

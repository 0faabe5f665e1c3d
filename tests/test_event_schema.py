"""
Tests for TransactionEvent validation.
"""

import pytest
from pydantic import ValidationError

from payment_ledger.models.enums import EventType
from payment_ledger.models.money import Money
from payment_ledger.schemas.event import TransactionEvent


class TestTransactionEvent:

    def test_deposit_from_text(self):
        event = TransactionEvent.model_validate(
            {"type": "deposit", "client": "1", "tx": "7", "amount": "1.5"}
        )
        assert event.type == EventType.DEPOSIT
        assert event.client == 1
        assert event.tx == 7
        assert event.amount == Money.parse("1.5")

    def test_type_is_case_insensitive(self):
        event = TransactionEvent(type=" Withdrawal ", client=1, tx=1, amount="1")
        assert event.type == EventType.WITHDRAWAL

    def test_number_amounts_accepted(self):
        assert TransactionEvent(type="deposit", client=1, tx=1, amount=2.742).amount == Money(27420)
        assert TransactionEvent(type="deposit", client=1, tx=1, amount=3).amount == Money(30000)

    @pytest.mark.parametrize("kind", ["dispute", "resolve", "chargeback"])
    def test_dispute_flow_ignores_amount(self, kind):
        event = TransactionEvent(type=kind, client=1, tx=1, amount="not money")
        assert event.amount is None

    def test_dispute_without_amount(self):
        event = TransactionEvent(type="dispute", client=1, tx=1)
        assert event.amount is None

    @pytest.mark.parametrize("kind", ["deposit", "withdrawal"])
    def test_amount_required(self, kind):
        with pytest.raises(ValidationError, match="requires an amount"):
            TransactionEvent(type=kind, client=1, tx=1)

    def test_blank_amount_counts_as_missing(self):
        with pytest.raises(ValidationError, match="requires an amount"):
            TransactionEvent(type="deposit", client=1, tx=1, amount="  ")

    @pytest.mark.parametrize("amount", ["0", "-1"])
    def test_amount_must_be_positive(self, amount):
        with pytest.raises(ValidationError, match="positive"):
            TransactionEvent(type="deposit", client=1, tx=1, amount=amount)

    def test_malformed_amount_rejected(self):
        with pytest.raises(ValidationError, match="fractional digits"):
            TransactionEvent(type="deposit", client=1, tx=1, amount="1.00001")

    def test_bool_amount_rejected(self):
        with pytest.raises(ValidationError):
            TransactionEvent(type="deposit", client=1, tx=1, amount=True)

    @pytest.mark.parametrize("field, value", [
        ("client", 65536),
        ("client", -1),
        ("tx", 4294967296),
    ])
    def test_identifier_ranges(self, field, value):
        data = {"type": "deposit", "client": 1, "tx": 1, "amount": "1"}
        data[field] = value
        with pytest.raises(ValidationError):
            TransactionEvent.model_validate(data)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            TransactionEvent(type="refund", client=1, tx=1, amount="1")

    def test_events_are_immutable(self):
        event = TransactionEvent(type="deposit", client=1, tx=1, amount="1")
        with pytest.raises(ValidationError):
            event.client = 2

    def test_amount_serialised_as_display_text(self):
        event = TransactionEvent(type="deposit", client=1, tx=1, amount="1.5")
        assert event.model_dump(mode="json")["amount"] == "1.5000"

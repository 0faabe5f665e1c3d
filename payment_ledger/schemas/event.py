"""
Pydantic schema for one transaction event.

The same model validates CSV rows and JSON request bodies. Amounts
are parsed straight into Money from their text, never via float
arithmetic.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    Field,
    PlainSerializer,
    PlainValidator,
    WithJsonSchema,
    field_validator,
    model_validator,
)

from payment_ledger.models.enums import EventType
from payment_ledger.models.money import Money

# Dispute-flow events refer to an earlier transaction; any amount on them is ignored
DISPUTE_FLOW = {EventType.DISPUTE, EventType.RESOLVE, EventType.CHARGEBACK}
_DISPUTE_FLOW_NAMES = {t.value for t in DISPUTE_FLOW}


def _to_money(value: Any) -> Money | None:
    if isinstance(value, Money):
        return value
    if isinstance(value, bool):
        raise ValueError("amount must be a decimal number")
    if isinstance(value, str):
        if not value.strip():
            return None
        return Money.parse(value)
    if isinstance(value, Decimal):
        return Money.from_decimal(value)
    if isinstance(value, (int, float)):
        # repr of a float is the shortest text that round-trips, e.g. 2.742
        return Money.parse(repr(value))
    raise ValueError("amount must be a decimal number")


MoneyAmount = Annotated[
    Money,
    PlainValidator(_to_money),
    PlainSerializer(lambda m: m.to_display_text(), return_type=str),
    WithJsonSchema({"type": "string", "examples": ["10.0000"]}),
]


class TransactionEvent(BaseModel):
    type: EventType
    client: int = Field(ge=0, le=65535)
    tx: int = Field(ge=0, le=4294967295)
    amount: MoneyAmount | None = None

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @model_validator(mode="before")
    @classmethod
    def _drop_dispute_amount(cls, data: Any) -> Any:
        if isinstance(data, dict):
            kind = data.get("type")
            if isinstance(kind, str) and kind.strip().lower() in _DISPUTE_FLOW_NAMES:
                data = {**data, "amount": None}
        return data

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _check_amount(self) -> "TransactionEvent":
        if self.type in DISPUTE_FLOW:
            return self
        if self.amount is None:
            raise ValueError(f"{self.type.value} requires an amount")
        if self.amount.units <= 0:
            raise ValueError("amount must be positive")
        return self

    def __str__(self) -> str:
        amount = f" amount={self.amount}" if self.amount is not None else ""
        return f"{self.type.value} client={self.client} tx={self.tx}{amount}"

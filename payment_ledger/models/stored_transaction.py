"""
Persisted transaction record.

Database row behind SqlTransactionRecordStore. The amount is kept as
the scaled integer count of ten-thousandths, so reading it back gives
exactly the Money that was written.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Enum as SAEnum, Integer
from sqlalchemy.orm import Mapped, mapped_column

from payment_ledger.models.base import Base
from payment_ledger.models.enums import DisputeStatus, TransactionKind
from payment_ledger.models.money import Money
from payment_ledger.models.transaction_record import TransactionRecord


class StoredTransaction(Base):
    __tablename__ = "transaction_records"

    transaction_id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False
    )
    client_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True
    )
    kind: Mapped[TransactionKind] = mapped_column(
        SAEnum(
            TransactionKind,
            name="transaction_kind_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    amount_units: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[DisputeStatus] = mapped_column(
        SAEnum(
            DisputeStatus,
            name="dispute_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=DisputeStatus.NONE,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, index=True
    )

    @classmethod
    def from_record(
        cls, record: TransactionRecord, created_at: datetime
    ) -> "StoredTransaction":
        return cls(
            transaction_id=record.transaction_id,
            client_id=record.client_id,
            kind=record.kind,
            amount_units=record.amount.units,
            status=record.status,
            created_at=created_at,
        )

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            transaction_id=self.transaction_id,
            client_id=self.client_id,
            kind=self.kind,
            amount=Money(self.amount_units),
            status=self.status,
        )

    def __repr__(self) -> str:
        return (
            f"<StoredTransaction {self.transaction_id} {self.kind.value} "
            f"{Money(self.amount_units)} ({self.status.value})>"
        )

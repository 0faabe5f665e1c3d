"""create transaction_records

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "transaction_records",
        sa.Column("transaction_id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column(
            "kind",
            sa.Enum("DEPOSIT", "WITHDRAWAL", name="transaction_kind_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("amount_units", sa.BigInteger(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("NONE", "DISPUTED", "CHARGED_BACK", name="dispute_status_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("transaction_id"),
    )
    op.create_index("ix_transaction_records_client_id", "transaction_records", ["client_id"])
    op.create_index("ix_transaction_records_created_at", "transaction_records", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_transaction_records_created_at", table_name="transaction_records")
    op.drop_index("ix_transaction_records_client_id", table_name="transaction_records")
    op.drop_table("transaction_records")
    sa.Enum(name="dispute_status_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="transaction_kind_enum").drop(op.get_bind(), checkfirst=True)

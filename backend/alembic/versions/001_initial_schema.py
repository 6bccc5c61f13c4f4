"""Initial schema — customers and credits.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("tax_id", sa.String(14), nullable=False, unique=True),
        sa.Column("income", sa.Numeric(15, 2), nullable=False, server_default="0"),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("zip_code", sa.String(20), nullable=False),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "credits",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("credit_code", sa.Uuid, nullable=False, unique=True),
        sa.Column("credit_value", sa.Numeric(15, 2), nullable=False),
        sa.Column("day_first_installment", sa.Date, nullable=False),
        sa.Column("number_of_installments", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column(
            "customer_id", sa.Integer,
            sa.ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_credits_customer_id", "credits", ["customer_id"])


def downgrade() -> None:
    op.drop_index("ix_credits_customer_id", table_name="credits")
    op.drop_table("credits")
    op.drop_table("customers")

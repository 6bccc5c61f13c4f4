"""Customer ORM — persists the aggregate root that owns credit requests.

Invariants:
    - id is an autoincrement integer primary key
    - tax_id and email are unique (store-enforced; violations become ConflictFailure)
    - password is stored but never exposed through response schemas
    - income is a non-negative decimal (validated before construction)

Design Decisions:
    - Numeric(15, 2) for money: exact decimal arithmetic, no float drift
    - cascade delete for credits: deleting a customer removes its credit requests
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Numeric, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from credit_system.db.base import Base


class Customer(Base):
    """Customer aggregate root — owns all of its credits."""
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    tax_id: Mapped[str] = mapped_column(
        String(14), nullable=False, unique=True,
    )
    income: Mapped[Decimal] = mapped_column(
        Numeric(15, 2), nullable=False, default=Decimal("0"),
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    credits: Mapped[list["Credit"]] = relationship(
        "Credit", back_populates="customer",
        cascade="all, delete-orphan", lazy="selectin",
    )

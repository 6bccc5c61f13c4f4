"""Credit ORM — persists a single loan request.

Invariants:
    - Always belongs to a Customer (customer_id FK, non-nullable)
    - credit_code is a UUID4, generated on insert when not supplied, unique
    - status starts at PENDING
    - Immutable after creation (no update path)

Design Decisions:
    - Integer surrogate key + UUID business key: the code is what clients see
    - customer relationship eager (selectin): credit views always need email/income
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Numeric, Integer, Date, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from credit_system.core.domain_types import CreditStatus
from credit_system.db.base import Base


class Credit(Base):
    """Credit request entity."""
    __tablename__ = "credits"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    credit_code: Mapped[uuid.UUID] = mapped_column(
        Uuid, nullable=False, unique=True, default=uuid.uuid4,
    )
    credit_value: Mapped[Decimal] = mapped_column(
        Numeric(15, 2), nullable=False,
    )
    day_first_installment: Mapped[date] = mapped_column(Date, nullable=False)
    number_of_installments: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CreditStatus.PENDING.value,
    )
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="credits", lazy="selectin",
    )

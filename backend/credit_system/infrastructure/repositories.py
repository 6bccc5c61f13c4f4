"""SQLAlchemy Repositories — AsyncSession-backed implementations of the persistence Protocols.

Invariants:
    - save() adds + flushes: ids and credit codes are populated on return, nothing committed
    - IntegrityError on flush rolls back and surfaces as ConflictFailure (409)
    - find_* return None / empty list, never raise for absence

Design Decisions:
    - One session shared by both repositories within a request: single transaction
    - Conflict message names the unique fields rather than echoing driver text
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from credit_system.core.errors import ConflictFailure
from credit_system.models.credit import Credit
from credit_system.models.customer import Customer

logger = logging.getLogger(__name__)


async def _flush_or_conflict(db: AsyncSession, message: str) -> None:
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Uniqueness conflict: {e.orig}")
        raise ConflictFailure(message)


class SqlCustomerRepository:
    """Customer persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, customer: Customer) -> Customer:
        self.db.add(customer)
        await _flush_or_conflict(
            self.db, "Customer with this email or tax id already exists",
        )
        return customer

    async def find_by_id(self, customer_id: int) -> Customer | None:
        result = await self.db.execute(
            select(Customer).where(Customer.id == customer_id),
        )
        return result.scalar_one_or_none()

    async def delete(self, customer: Customer) -> None:
        await self.db.delete(customer)
        await self.db.flush()

    async def delete_all(self) -> None:
        await self.db.execute(delete(Credit))
        await self.db.execute(delete(Customer))


class SqlCreditRepository:
    """Credit persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, credit: Credit) -> Credit:
        self.db.add(credit)
        await _flush_or_conflict(self.db, "Credit code already exists")
        return credit

    async def find_by_code(self, credit_code: UUID) -> Credit | None:
        result = await self.db.execute(
            select(Credit).where(Credit.credit_code == credit_code),
        )
        return result.scalar_one_or_none()

    async def find_all_by_customer_id(self, customer_id: int) -> list[Credit]:
        result = await self.db.execute(
            select(Credit)
            .where(Credit.customer_id == customer_id)
            .order_by(Credit.id),
        )
        return list(result.scalars().all())

    async def delete_all(self) -> None:
        await self.db.execute(delete(Credit))

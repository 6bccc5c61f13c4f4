"""Service Dependencies — per-request wiring of repositories into services.

Invariants:
    - One AsyncSession per request, shared by every repository the service uses
    - The session doubles as the unit of work (commit/rollback)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_system.infrastructure.database import get_db
from credit_system.infrastructure.repositories import (
    SqlCreditRepository, SqlCustomerRepository,
)
from credit_system.services.credit_service import CreditService
from credit_system.services.customer_service import CustomerService


def get_credit_service(db: AsyncSession = Depends(get_db)) -> CreditService:
    return CreditService(
        customers=SqlCustomerRepository(db),
        credits=SqlCreditRepository(db),
        uow=db,
    )


def get_customer_service(db: AsyncSession = Depends(get_db)) -> CustomerService:
    return CustomerService(customers=SqlCustomerRepository(db), uow=db)

"""Boundary Protocols — persistence contracts between services and the store.

Invariants:
    - Services depend on these Protocols, never on AsyncSession directly
    - save() flushes: generated ids/codes are populated on return
    - A uniqueness violation inside save() surfaces as ConflictFailure
    - Implementations provided by infrastructure/repositories.py, passed via constructors

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async methods: implementations do IO; commit stays with the caller (explicit transaction boundary)
"""

from typing import Protocol
from uuid import UUID

from credit_system.models.credit import Credit
from credit_system.models.customer import Customer


class CustomerRepository(Protocol):
    """Contract for customer persistence."""
    async def save(self, customer: Customer) -> Customer: ...
    async def find_by_id(self, customer_id: int) -> Customer | None: ...
    async def delete(self, customer: Customer) -> None: ...
    async def delete_all(self) -> None: ...


class CreditRepository(Protocol):
    """Contract for credit persistence."""
    async def save(self, credit: Credit) -> Credit: ...
    async def find_by_code(self, credit_code: UUID) -> Credit | None: ...
    async def find_all_by_customer_id(self, customer_id: int) -> list[Credit]: ...
    async def delete_all(self) -> None: ...


class UnitOfWork(Protocol):
    """Transaction boundary for one request."""
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

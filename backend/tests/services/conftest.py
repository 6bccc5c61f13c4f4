"""Service test fixtures — in-memory repositories satisfying the persistence Protocols.

Invariants:
    - No database: services are exercised against dict-backed fakes
    - Fakes mimic flush semantics (ids assigned, FK copied from relationship on save)
    - commit() calls are counted so tests can assert the transaction boundary
"""

from datetime import date
from decimal import Decimal

import pytest

from credit_system.core.errors import ConflictFailure
from credit_system.models.customer import Customer
from credit_system.services.credit_service import CreditService
from credit_system.services.customer_service import CustomerService


FIXED_TODAY = date(2026, 3, 10)


class FakeCustomerRepository:
    def __init__(self):
        self.rows: dict[int, Customer] = {}
        self._next_id = 1
        self.lookups: list[int] = []

    async def save(self, customer):
        for other in self.rows.values():
            if other is customer:
                continue
            if other.email == customer.email or other.tax_id == customer.tax_id:
                raise ConflictFailure("Customer with this email or tax id already exists")
        if customer.id is None:
            customer.id = self._next_id
            self._next_id += 1
        self.rows[customer.id] = customer
        return customer

    async def find_by_id(self, customer_id):
        self.lookups.append(customer_id)
        return self.rows.get(customer_id)

    async def delete(self, customer):
        self.rows.pop(customer.id, None)

    async def delete_all(self):
        self.rows.clear()


class FakeCreditRepository:
    def __init__(self):
        self.rows = []

    async def save(self, credit):
        credit.id = len(self.rows) + 1
        credit.customer_id = credit.customer.id
        self.rows.append(credit)
        return credit

    async def find_by_code(self, credit_code):
        return next((c for c in self.rows if c.credit_code == credit_code), None)

    async def find_all_by_customer_id(self, customer_id):
        return [c for c in self.rows if c.customer_id == customer_id]

    async def delete_all(self):
        self.rows.clear()


class FakeUnitOfWork:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1


@pytest.fixture
def customers():
    return FakeCustomerRepository()


@pytest.fixture
def credits():
    return FakeCreditRepository()


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def today():
    return FIXED_TODAY


@pytest.fixture
def credit_service(customers, credits, uow, today):
    return CreditService(customers, credits, uow, today=lambda: today)


@pytest.fixture
def customer_service(customers, uow):
    return CustomerService(customers, uow)


@pytest.fixture
async def camila(customers):
    """A stored customer."""
    return await customers.save(Customer(
        first_name="Cami",
        last_name="Cavalcante",
        tax_id="28475934625",
        income=Decimal("1000.0"),
        email="camila@email.com",
        password="1234",
        zip_code="000000",
        street="Rua da Cami, 123",
    ))

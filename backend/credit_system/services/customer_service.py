"""Customer Service — registration, lookup, profile update and deletion.

Invariants:
    - All field violations reported together in one ValidationFailure
    - Unknown ids read "Id {id} not found" (400), same as credit creation
    - Deleting a customer deletes its credits (ORM cascade)
    - Duplicate email / tax id surfaces from the repository as ConflictFailure (409)
"""

import logging

from credit_system.core.errors import ErrorContext, NotFoundFailure, ValidationFailure
from credit_system.core.repository_protocols import CustomerRepository, UnitOfWork
from credit_system.core.validate_credit import customer_not_found_message, is_storable_id
from credit_system.core.validate_customer import (
    collect_customer_update_violations, collect_customer_violations,
    customer_saved_message, normalize_tax_id,
)
from credit_system.models.customer import Customer
from credit_system.schemas.customer import CustomerCreate, CustomerUpdate, CustomerView

logger = logging.getLogger(__name__)


def to_customer_view(customer: Customer) -> CustomerView:
    return CustomerView(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        tax_id=customer.tax_id,
        income=customer.income,
        email=customer.email,
        zip_code=customer.zip_code,
        street=customer.street,
    )


class CustomerService:
    """Customer request handlers."""

    def __init__(self, customers: CustomerRepository, uow: UnitOfWork):
        self.customers = customers
        self.uow = uow

    async def find_by_id(self, customer_id: int) -> Customer:
        customer = None
        if is_storable_id(customer_id):
            customer = await self.customers.find_by_id(customer_id)
        if customer is None:
            raise NotFoundFailure(
                customer_not_found_message(customer_id),
                ErrorContext(customer_id=customer_id),
            )
        return customer

    async def register(self, body: CustomerCreate) -> str:
        violations = collect_customer_violations(
            body.first_name, body.last_name, body.tax_id, body.income,
            body.email, body.password, body.zip_code, body.street,
        )
        if violations:
            raise ValidationFailure(violations)

        customer = Customer(
            first_name=body.first_name.strip(),
            last_name=body.last_name.strip(),
            tax_id=normalize_tax_id(body.tax_id),
            income=body.income,
            email=body.email.strip(),
            password=body.password,
            zip_code=body.zip_code.strip(),
            street=body.street.strip(),
        )
        customer = await self.customers.save(customer)
        await self.uow.commit()
        logger.info("Customer saved", extra={"customer_id": customer.id})
        return customer_saved_message(customer.email)

    async def update(self, customer_id: int, body: CustomerUpdate) -> CustomerView:
        violations = collect_customer_update_violations(
            body.first_name, body.last_name, body.income,
            body.zip_code, body.street,
        )
        if violations:
            raise ValidationFailure(
                violations, ErrorContext(customer_id=customer_id),
            )

        customer = await self.find_by_id(customer_id)
        customer.first_name = body.first_name.strip()
        customer.last_name = body.last_name.strip()
        customer.income = body.income
        customer.zip_code = body.zip_code.strip()
        customer.street = body.street.strip()
        customer = await self.customers.save(customer)
        await self.uow.commit()
        logger.info("Customer updated", extra={"customer_id": customer_id})
        return to_customer_view(customer)

    async def delete(self, customer_id: int) -> None:
        customer = await self.find_by_id(customer_id)
        await self.customers.delete(customer)
        await self.uow.commit()
        logger.info("Customer deleted", extra={"customer_id": customer_id})

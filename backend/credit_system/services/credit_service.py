"""Credit Service — orchestrates credit creation and lookups.

Invariants:
    - Field violations are checked before the customer is resolved (no store access on bad input)
    - An unknown customer id is reported as "Id {id} not found" (400, not 404)
    - A credit is only shown to its owning customer; mismatch reads "Contact admin"
    - New credits are always PENDING with a fresh UUID4 code
    - Commit happens here, once per successful request (explicit transaction boundary)

Design Decisions:
    - Repositories and clock injected via constructor: routes wire SQL implementations,
      tests wire in-memory fakes
    - Core validators return messages; this shell raises the typed errors
"""

import logging
import uuid
from collections.abc import Callable
from datetime import date

from credit_system.core.domain_types import CreditStatus
from credit_system.core.errors import (
    BusinessRuleFailure, ErrorContext, MalformedIdentifierFailure,
    NotFoundFailure, ValidationFailure,
)
from credit_system.core.repository_protocols import (
    CreditRepository, CustomerRepository, UnitOfWork,
)
from credit_system.core.validate_credit import (
    check_credit_owner, check_first_installment, collect_credit_violations,
    credit_not_found_message, customer_not_found_message,
    format_credit_saved, is_storable_id, parse_credit_code,
)
from credit_system.models.credit import Credit
from credit_system.models.customer import Customer
from credit_system.schemas.credit import CreditCreate, CreditSummary, CreditView

logger = logging.getLogger(__name__)


class CreditService:
    """Credit request handlers."""

    def __init__(
        self,
        customers: CustomerRepository,
        credits: CreditRepository,
        uow: UnitOfWork,
        today: Callable[[], date] = date.today,
    ):
        self.customers = customers
        self.credits = credits
        self.uow = uow
        self.today = today

    async def _customer_or_fail(self, customer_id: int) -> Customer:
        customer = None
        if is_storable_id(customer_id):
            customer = await self.customers.find_by_id(customer_id)
        if customer is None:
            raise NotFoundFailure(
                customer_not_found_message(customer_id),
                ErrorContext(customer_id=customer_id),
            )
        return customer

    async def create(self, body: CreditCreate) -> str:
        """Validate, persist and confirm a credit request."""
        violations = collect_credit_violations(
            body.credit_value, body.number_of_installments,
        )
        if violations:
            raise ValidationFailure(
                violations, ErrorContext(customer_id=body.customer_id),
            )

        customer = await self._customer_or_fail(body.customer_id)

        date_violation = check_first_installment(
            body.day_first_installment, self.today(),
        )
        if date_violation:
            raise BusinessRuleFailure(
                date_violation, ErrorContext(customer_id=customer.id),
            )

        credit = Credit(
            credit_code=uuid.uuid4(),
            credit_value=body.credit_value,
            day_first_installment=body.day_first_installment,
            number_of_installments=body.number_of_installments,
            status=CreditStatus.PENDING.value,
            customer=customer,
        )
        credit = await self.credits.save(credit)
        await self.uow.commit()
        logger.info(
            "Credit saved",
            extra={"customer_id": customer.id, "credit_code": credit.credit_code},
        )
        return format_credit_saved(credit.credit_code, customer.email)

    async def find_all_by_customer(self, customer_id: int) -> list[CreditSummary]:
        if not is_storable_id(customer_id):
            return []
        credits = await self.credits.find_all_by_customer_id(customer_id)
        return [
            CreditSummary(
                credit_code=c.credit_code,
                credit_value=c.credit_value,
                number_of_installments=c.number_of_installments,
            )
            for c in credits
        ]

    async def find_by_code(self, raw_code: str, customer_id: int) -> CreditView:
        """Look up a credit by code on behalf of a customer."""
        credit_code = parse_credit_code(raw_code)
        if credit_code is None:
            raise MalformedIdentifierFailure(
                raw_code, ErrorContext(customer_id=customer_id),
            )

        credit = await self.credits.find_by_code(credit_code)
        if credit is None:
            raise NotFoundFailure(
                credit_not_found_message(credit_code),
                ErrorContext(customer_id=customer_id, credit_code=str(credit_code)),
            )

        mismatch = check_credit_owner(credit.customer_id, customer_id)
        if mismatch:
            raise BusinessRuleFailure(
                mismatch,
                ErrorContext(customer_id=customer_id, credit_code=str(credit_code)),
            )

        return CreditView(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
            status=CreditStatus(credit.status),
            email_customer=credit.customer.email,
            income_customer=credit.customer.income,
        )

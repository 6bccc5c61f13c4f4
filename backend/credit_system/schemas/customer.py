"""Customer Schemas — Pydantic request/response models for the customer endpoints.

Invariants:
    - CustomerView never exposes password
    - Field rules (blank, tax id, email, income) live in core/validate_customer.py
"""

from decimal import Decimal

from credit_system.schemas.credit import CamelModel, Money


class CustomerCreate(CamelModel):
    """Registration body."""
    first_name: str
    last_name: str
    tax_id: str
    income: Decimal
    email: str
    password: str
    zip_code: str
    street: str


class CustomerUpdate(CamelModel):
    """Profile update body. Tax id, email and password are not updatable."""
    first_name: str
    last_name: str
    income: Decimal
    zip_code: str
    street: str


class CustomerView(CamelModel):
    id: int
    first_name: str
    last_name: str
    tax_id: str
    income: Money
    email: str
    zip_code: str
    street: str

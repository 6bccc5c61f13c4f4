"""Credit Schemas — Pydantic request/response models for the credit endpoints.

Invariants:
    - Wire format is camelCase; Python attributes are snake_case (alias generator)
    - Schemas only check types/shape; range and business rules live in core/validate_credit.py
    - Money serializes as a JSON number, never a string

Design Decisions:
    - No Field(ge=..., le=...) bounds here: bound messages must be the domain's
      ("must be less than or equal to 48"), not pydantic's wording
"""

from datetime import date
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from credit_system.core.domain_types import CreditStatus


Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base for all API schemas: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )


class CreditCreate(CamelModel):
    """Credit request body."""
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int


class CreditView(CamelModel):
    """Full credit view returned by lookup-by-code."""
    credit_code: UUID
    credit_value: Money
    number_of_installments: int
    status: CreditStatus
    email_customer: str
    income_customer: Money


class CreditSummary(CamelModel):
    """One row of the per-customer credit listing."""
    credit_code: UUID
    credit_value: Money
    number_of_installments: int

"""Credit Routes — create, list and look up credit requests.

Invariants:
    - Routes hold no business logic; CreditService owns validation and persistence
    - creditCode path segment is taken as raw text and parsed by the service,
      so a malformed code yields the domain error, not a framework 422
    - customerId query param is mandatory on lookups
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from credit_system.api.dependencies import get_credit_service
from credit_system.schemas.credit import CreditCreate, CreditSummary, CreditView
from credit_system.services.credit_service import CreditService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/credits", tags=["credits"])


@router.post(
    "", response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_credit(
    body: CreditCreate, service: CreditService = Depends(get_credit_service),
):
    """Register a credit request. Returns a plain-text confirmation."""
    message = await service.create(body)
    return PlainTextResponse(message, status_code=status.HTTP_201_CREATED)


@router.get("", response_model=list[CreditSummary])
async def list_credits(
    customer_id: int = Query(..., alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    """All credits owned by a customer."""
    return await service.find_all_by_customer(customer_id)


@router.get("/{credit_code}", response_model=CreditView)
async def get_credit(
    credit_code: str,
    customer_id: int = Query(..., alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    """Credit details, visible only to the owning customer."""
    return await service.find_by_code(credit_code, customer_id)

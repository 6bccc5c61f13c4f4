"""Customer Routes — registration, lookup, profile update and deletion.

Invariants:
    - Routes hold no business logic; CustomerService owns validation and persistence
    - Responses never carry the password
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse

from credit_system.api.dependencies import get_customer_service
from credit_system.schemas.customer import CustomerCreate, CustomerUpdate, CustomerView
from credit_system.services.customer_service import CustomerService, to_customer_view

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.post(
    "", response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_customer(
    body: CustomerCreate, service: CustomerService = Depends(get_customer_service),
):
    """Register a customer. Returns a plain-text confirmation."""
    message = await service.register(body)
    return PlainTextResponse(message, status_code=status.HTTP_201_CREATED)


@router.get("/{customer_id}", response_model=CustomerView)
async def get_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service),
):
    customer = await service.find_by_id(customer_id)
    return to_customer_view(customer)


@router.patch("", response_model=CustomerView)
async def update_customer(
    body: CustomerUpdate,
    customer_id: int = Query(..., alias="customerId"),
    service: CustomerService = Depends(get_customer_service),
):
    """Update name, income and address of a customer."""
    return await service.update(customer_id, body)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer together with its credits."""
    await service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

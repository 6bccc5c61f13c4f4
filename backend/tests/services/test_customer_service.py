"""Customer Service — registration, lookup, update and deletion.

Invariants:
    - Registration aggregates all field violations
    - Tax id stored as digits only
    - Duplicate email/tax id raises ConflictFailure without committing
    - Unknown ids raise NotFoundFailure (400)
"""

from decimal import Decimal

import pytest

from credit_system.core.errors import ConflictFailure, NotFoundFailure, ValidationFailure
from credit_system.schemas.customer import CustomerCreate, CustomerUpdate


def _registration(**overrides):
    data = {
        "first_name": "Cami",
        "last_name": "Cavalcante",
        "tax_id": "284.759.346-25",
        "income": Decimal("1000.0"),
        "email": "camila@email.com",
        "password": "1234",
        "zip_code": "000000",
        "street": "Rua da Cami, 123",
    }
    data.update(overrides)
    return CustomerCreate(**data)


async def test_register_saves_and_confirms(customer_service, customers, uow):
    message = await customer_service.register(_registration())

    assert message == "Customer camila@email.com saved!"
    stored = customers.rows[1]
    assert stored.tax_id == "28475934625"
    assert uow.commits == 1


async def test_register_reports_all_violations(customer_service, customers):
    with pytest.raises(ValidationFailure) as exc_info:
        await customer_service.register(
            _registration(tax_id="12345678900", email="broken"),
        )
    assert exc_info.value.details == ["Invalid tax id", "Invalid email"]
    assert customers.rows == {}


async def test_register_duplicate_email_conflicts(customer_service, uow, camila):
    with pytest.raises(ConflictFailure) as exc_info:
        await customer_service.register(_registration(tax_id="52998224725"))
    assert exc_info.value.http_status == 409
    assert uow.commits == 0


async def test_find_by_id_unknown(customer_service):
    with pytest.raises(NotFoundFailure) as exc_info:
        await customer_service.find_by_id(42)
    assert exc_info.value.details == ["Id 42 not found"]


@pytest.mark.parametrize("customer_id", [0, 2**31, 2**70])
async def test_find_by_id_out_of_range_skips_repository(customer_service, customers, customer_id):
    with pytest.raises(NotFoundFailure) as exc_info:
        await customer_service.find_by_id(customer_id)
    assert exc_info.value.details == [f"Id {customer_id} not found"]
    assert customers.lookups == []


async def test_update_changes_profile(customer_service, camila):
    view = await customer_service.update(camila.id, CustomerUpdate(
        first_name="Camila", last_name="Cavalcante", income=Decimal("2500"),
        zip_code="111111", street="Rua Nova, 1",
    ))
    assert view.first_name == "Camila"
    assert view.income == Decimal("2500")
    assert view.email == "camila@email.com"


async def test_update_rejects_negative_income(customer_service, camila):
    with pytest.raises(ValidationFailure) as exc_info:
        await customer_service.update(camila.id, CustomerUpdate(
            first_name="Camila", last_name="Cavalcante", income=Decimal("-1"),
            zip_code="111111", street="Rua Nova, 1",
        ))
    assert exc_info.value.details == ["must be greater than or equal to 0"]


async def test_update_rejects_income_with_sub_cent_precision(customer_service, camila):
    with pytest.raises(ValidationFailure) as exc_info:
        await customer_service.update(camila.id, CustomerUpdate(
            first_name="Camila", last_name="Cavalcante", income=Decimal("2500.001"),
            zip_code="111111", street="Rua Nova, 1",
        ))
    assert exc_info.value.details == [
        "numeric value out of bounds (<13 digits>.<2 digits> expected)",
    ]
    assert camila.income == Decimal("1000.0")


async def test_delete_removes_customer(customer_service, customers, uow, camila):
    await customer_service.delete(camila.id)
    assert camila.id not in customers.rows
    assert uow.commits == 1


async def test_delete_unknown_customer(customer_service):
    with pytest.raises(NotFoundFailure):
        await customer_service.delete(7)

"""Customer Routes — end-to-end behaviour of /api/customers over HTTP.

Invariants:
    - POST returns 201 with "Customer {email} saved!"
    - Duplicate email/tax id → 409 "Conflict! Consult the documentation"
    - Unknown ids → 400 "Id {id} not found"
    - Password never appears in responses
    - DELETE cascades to the customer's credits
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from sqlalchemy import select

from credit_system.models.credit import Credit

URL = "/api/customers"


def _customer_body(**overrides):
    body = {
        "firstName": "Cami",
        "lastName": "Cavalcante",
        "taxId": "28475934625",
        "income": 1000.0,
        "email": "camila@email.com",
        "password": "1234",
        "zipCode": "000000",
        "street": "Rua da Cami, 123",
    }
    body.update(overrides)
    return body


async def test_register_customer_returns_201(client):
    res = await client.post(URL, json=_customer_body())
    assert res.status_code == 201
    assert res.text == "Customer camila@email.com saved!"


async def test_register_customer_with_invalid_fields_returns_400(client):
    res = await client.post(
        URL, json=_customer_body(taxId="12345678900", email="not-an-email"),
    )
    assert res.status_code == 400
    body = res.json()
    assert body["exception"] == "ValidationFailure"
    assert body["details"] == ["Invalid tax id", "Invalid email"]


async def test_register_duplicate_email_returns_409(client, seed_customer):
    res = await client.post(URL, json=_customer_body(taxId="52998224725"))

    assert res.status_code == 409
    body = res.json()
    assert body["title"] == "Conflict! Consult the documentation"
    assert body["status"] == 409
    assert body["exception"] == "ConflictFailure"


async def test_register_duplicate_tax_id_returns_409(client, seed_customer):
    res = await client.post(URL, json=_customer_body(email="other@email.com"))
    assert res.status_code == 409


async def test_get_customer_returns_view_without_password(client, seed_customer):
    res = await client.get(f"{URL}/{seed_customer.id}")

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == seed_customer.id
    assert body["email"] == "camila@email.com"
    assert body["taxId"] == "28475934625"
    assert body["income"] == 1000.0
    assert "password" not in body


async def test_get_unknown_customer_returns_400(client):
    res = await client.get(f"{URL}/330")
    assert res.status_code == 400
    assert res.json()["details"] == ["Id 330 not found"]


async def test_update_customer(client, seed_customer):
    res = await client.patch(
        URL,
        params={"customerId": seed_customer.id},
        json={
            "firstName": "Camila", "lastName": "Cavalcante",
            "income": 2500, "zipCode": "111111", "street": "Rua Nova, 1",
        },
    )
    assert res.status_code == 200
    body = res.json()
    assert body["firstName"] == "Camila"
    assert body["income"] == 2500.0
    assert body["street"] == "Rua Nova, 1"


async def test_delete_customer_cascades_credits(client, test_db, seed_customer):
    credit = Credit(
        customer=seed_customer,
        credit_value=Decimal("50000.0"),
        day_first_installment=date.today() + timedelta(days=45),
        number_of_installments=10,
    )
    test_db.add(credit)
    await test_db.commit()
    customer_id = seed_customer.id

    res = await client.delete(f"{URL}/{customer_id}")
    assert res.status_code == 204

    test_db.expunge_all()
    result = await test_db.execute(
        select(Credit).where(Credit.customer_id == customer_id),
    )
    assert result.scalars().all() == []
    assert (await client.get(f"{URL}/{customer_id}")).status_code == 400


async def test_delete_unknown_customer_returns_400(client):
    res = await client.delete(f"{URL}/404")
    assert res.status_code == 400


@pytest.mark.parametrize("customer_id", [2**31, 2**70])
async def test_out_of_range_customer_id_is_not_found(client, customer_id):
    expected = [f"Id {customer_id} not found"]
    update = {
        "firstName": "Camila", "lastName": "Cavalcante",
        "income": 2500, "zipCode": "111111", "street": "Rua Nova, 1",
    }

    responses = [
        await client.get(f"{URL}/{customer_id}"),
        await client.patch(URL, params={"customerId": customer_id}, json=update),
        await client.delete(f"{URL}/{customer_id}"),
    ]

    for res in responses:
        assert res.status_code == 400
        assert res.json()["exception"] == "NotFoundFailure"
        assert res.json()["details"] == expected


@pytest.mark.parametrize("income", ["1000.555", "99999999999999"])
async def test_register_customer_with_income_beyond_money_column_returns_400(client, income):
    res = await client.post(URL, json=_customer_body(income=income))
    assert res.status_code == 400
    assert res.json()["details"] == [
        "numeric value out of bounds (<13 digits>.<2 digits> expected)",
    ]

"""
Tests for settlement and payment-history endpoints.
"""
import pytest


async def _expense(client, headers, title, amount):
    response = await client.post(
        "/api/expenses",
        json={"title": title, "amount": amount},
        headers=headers
    )
    return response.json()["expense"]


@pytest.mark.asyncio
async def test_create_settlement(client, alice, bob, headers_for):
    rent = await _expense(client, headers_for(bob), "Rent", "400.00")
    internet = await _expense(client, headers_for(bob), "Internet", "25.50")

    response = await client.post(
        "/api/settlements",
        json={
            "payeeId": bob.id,
            "amount": "212.75",
            "description": "Half of rent and internet",
            "expenseIds": [rent["id"], internet["id"]]
        },
        headers=headers_for(alice)
    )

    assert response.status_code == 201
    data = response.json()
    assert data["settlement"]["payerId"] == alice.id
    assert data["settlement"]["payeeId"] == bob.id
    assert data["settlement"]["amount"] == "212.75"
    assert data["paymentHistory"]["settlementId"] == data["settlement"]["id"]
    assert data["paymentHistory"]["paymentMethod"] == "bank_transfer"
    assert data["paymentHistory"]["status"] == "completed"
    assert data["paidExpenseCount"] == 2

    expenses = await client.get("/api/expenses", headers=headers_for(bob))
    for expense in expenses.json()["expenses"]:
        assert expense["isPaid"] is True
        assert expense["isSettled"] is True
        assert expense["paymentDate"] is not None


@pytest.mark.asyncio
async def test_create_settlement_with_payment_method(client, alice, bob, headers_for):
    response = await client.post(
        "/api/settlements",
        json={"payeeId": bob.id, "amount": "10.00", "paymentMethod": "digital_wallet"},
        headers=headers_for(alice)
    )

    assert response.status_code == 201
    assert response.json()["paymentHistory"]["paymentMethod"] == "digital_wallet"


@pytest.mark.asyncio
async def test_create_settlement_rejects_unknown_method(client, alice, bob, headers_for):
    response = await client.post(
        "/api/settlements",
        json={"payeeId": bob.id, "amount": "10.00", "paymentMethod": "cheque"},
        headers=headers_for(alice)
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request data"


@pytest.mark.asyncio
async def test_create_settlement_requires_auth(client, bob):
    response = await client.post("/api/settlements", json={"payeeId": bob.id, "amount": "10.00"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_settlements_for_both_roommates(client, alice, bob, carol, headers_for):
    await client.post(
        "/api/settlements",
        json={"payeeId": bob.id, "amount": "150.75"},
        headers=headers_for(alice)
    )

    for user in (alice, bob):
        response = await client.get("/api/settlements", headers=headers_for(user))
        settlements = response.json()["settlements"]
        assert len(settlements) == 1
        assert settlements[0]["amount"] == "150.75"

    outsider = await client.get("/api/settlements", headers=headers_for(carol))
    assert outsider.json()["settlements"] == []


@pytest.mark.asyncio
async def test_payment_history(client, alice, bob, headers_for):
    await client.post("/api/settlements", json={"payeeId": bob.id, "amount": "10.00"}, headers=headers_for(alice))
    await client.post("/api/settlements", json={"payeeId": alice.id, "amount": "4.00"}, headers=headers_for(bob))

    response = await client.get("/api/settlements/payment-history", headers=headers_for(alice))

    assert response.status_code == 200
    history = response.json()["paymentHistory"]
    assert [p["amount"] for p in history] == ["4.00", "10.00"]


@pytest.mark.asyncio
async def test_payment_details(client, alice, bob, headers_for):
    groceries = await _expense(client, headers_for(bob), "Groceries", "150.75")
    created = await client.post(
        "/api/settlements",
        json={"payeeId": bob.id, "amount": "75.38", "expenseIds": [groceries["id"]]},
        headers=headers_for(alice)
    )
    payment_id = created.json()["paymentHistory"]["id"]

    response = await client.get(f"/api/settlements/payment-history/{payment_id}", headers=headers_for(bob))

    assert response.status_code == 200
    data = response.json()
    assert data["payment"]["id"] == payment_id
    assert len(data["paidExpenses"]) == 1
    paid = data["paidExpenses"][0]
    assert paid["amountPaid"] == "150.75"
    assert paid["expense"]["title"] == "Groceries"
    assert paid["expense"]["isPaid"] is True


@pytest.mark.asyncio
async def test_payment_details_hidden_from_outsiders(client, alice, bob, carol, headers_for):
    created = await client.post(
        "/api/settlements",
        json={"payeeId": bob.id, "amount": "10.00"},
        headers=headers_for(alice)
    )
    payment_id = created.json()["paymentHistory"]["id"]

    response = await client.get(f"/api/settlements/payment-history/{payment_id}", headers=headers_for(carol))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_payment_details_not_found(client, alice, headers_for):
    response = await client.get("/api/settlements/payment-history/12345", headers=headers_for(alice))

    assert response.status_code == 404
    assert response.json()["error"] == "Payment not found"

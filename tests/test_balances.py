import pytest


async def _expense(client, headers, amount, shared=True):
    await client.post(
        "/api/expenses",
        json={"title": "Item", "amount": amount, "isShared": shared},
        headers=headers
    )


@pytest.mark.asyncio
async def test_balance_between_roommates(client, alice, bob, headers_for):
    await _expense(client, headers_for(alice), "100.00")
    await _expense(client, headers_for(bob), "40.00")
    await _expense(client, headers_for(alice), "25.00", shared=False)

    response = await client.get(f"/api/balance/{bob.id}", headers=headers_for(alice))

    assert response.status_code == 200
    assert response.json() == {
        "totalPaid": "100.00",
        "totalShared": "140.00",
        "personalExpenses": "25.00",
        "netBalance": "30.00"
    }

    response = await client.get(f"/api/balance/{alice.id}", headers=headers_for(bob))
    assert response.json()["netBalance"] == "-30.00"


@pytest.mark.asyncio
async def test_paid_expenses_leave_the_balance(client, alice, bob, headers_for):
    await _expense(client, headers_for(bob), "60.00")
    unpaid = await client.get("/api/expenses/unpaid", headers=headers_for(alice))
    ids = [e["id"] for e in unpaid.json()["expenses"]]

    await client.post(
        "/api/settlements",
        json={"payeeId": bob.id, "amount": "30.00", "expenseIds": ids},
        headers=headers_for(alice)
    )

    response = await client.get(f"/api/balance/{bob.id}", headers=headers_for(alice))
    assert response.json()["netBalance"] == "0.00"
    assert response.json()["totalShared"] == "0.00"


@pytest.mark.asyncio
async def test_balance_unknown_user(client, alice, headers_for):
    response = await client.get("/api/balance/999", headers=headers_for(alice))

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_balance_with_yourself_is_rejected(client, alice, headers_for):
    await _expense(client, headers_for(alice), "100.00")

    response = await client.get(f"/api/balance/{alice.id}", headers=headers_for(alice))

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot compute a balance with yourself"}

"""Expense Routes — HTTP behaviour of /api/expenses.

Tests cover:
    - Create/list/get/update/delete round trip with camelCase wire names
    - Another user's expense answers exactly like a missing one (404)
    - 403 for foreign expenses when ownership denials are exposed
    - Owner fields in the body are ignored
    - Missing, invalid and orphaned tokens -> 401
    - Malformed bodies and out-of-range ids or dates -> 400 with field details
"""

import pytest

from expense_tracker.config import Settings, get_settings
from expense_tracker.main import app

COFFEE = {
    "description": "Coffee",
    "amount": 4.50,
    "category": "Food",
    "expenseDate": 1_700_000_000,
}
LATTE = {**COFFEE, "description": "Latte", "amount": 5.00}


@pytest.fixture
def alice_headers(user_a, auth_headers):
    return auth_headers(user_a.email)


@pytest.fixture
def bob_headers(user_b, auth_headers):
    return auth_headers(user_b.email)


async def _create(client, headers, body=COFFEE) -> dict:
    response = await client.post("/api/expenses", json=body, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


# ─── happy path ──────────────────────────────────────────────────

async def test_create_returns_camel_case_expense(client, alice_headers):
    data = await _create(client, alice_headers)
    assert data["id"] > 0
    assert data["description"] == "Coffee"
    assert data["amount"] == 4.5
    assert data["category"] == "Food"
    assert data["expenseDate"] == 1_700_000_000
    assert data["notes"] is None
    assert data["createdAt"] == data["updatedAt"]
    assert "owner" not in data and "userId" not in data


async def test_list_returns_only_callers_expenses(
    client, alice_headers, bob_headers,
):
    await _create(client, alice_headers)
    await _create(client, bob_headers, {**COFFEE, "description": "Bob tea"})

    response = await client.get("/api/expenses", headers=alice_headers)
    assert response.status_code == 200
    assert [e["description"] for e in response.json()] == ["Coffee"]


async def test_list_is_ordered_by_expense_date_descending(client, alice_headers):
    for date in (1_000, 3_000, 2_000):
        await _create(client, alice_headers, {**COFFEE, "expenseDate": date})

    response = await client.get("/api/expenses", headers=alice_headers)
    assert [e["expenseDate"] for e in response.json()] == [3_000, 2_000, 1_000]


async def test_category_route_filters_exactly(client, alice_headers):
    await _create(client, alice_headers)
    await _create(client, alice_headers, {**COFFEE, "category": "food"})

    response = await client.get(
        "/api/expenses/category/Food", headers=alice_headers,
    )
    assert response.status_code == 200
    assert [e["category"] for e in response.json()] == ["Food"]


async def test_category_route_unknown_category_is_empty(client, alice_headers):
    await _create(client, alice_headers)
    response = await client.get(
        "/api/expenses/category/Travel", headers=alice_headers,
    )
    assert response.status_code == 200
    assert response.json() == []


async def test_get_own_expense(client, alice_headers):
    created = await _create(client, alice_headers)
    response = await client.get(
        f"/api/expenses/{created['id']}", headers=alice_headers,
    )
    assert response.status_code == 200
    assert response.json() == created


async def test_owner_update_replaces_fields(client, alice_headers):
    created = await _create(client, alice_headers)
    response = await client.put(
        f"/api/expenses/{created['id']}", json=LATTE, headers=alice_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == created["id"]
    assert data["description"] == "Latte"
    assert data["amount"] == 5.0
    assert data["createdAt"] == created["createdAt"]
    assert data["updatedAt"] >= created["updatedAt"]


async def test_delete_then_get_is_404(client, alice_headers):
    created = await _create(client, alice_headers)
    url = f"/api/expenses/{created['id']}"

    response = await client.delete(url, headers=alice_headers)
    assert response.status_code == 200

    response = await client.get(url, headers=alice_headers)
    assert response.status_code == 404


# ─── ownership ───────────────────────────────────────────────────

async def test_foreign_expense_answers_like_missing_one(
    client, alice_headers, bob_headers,
):
    created = await _create(client, alice_headers)
    missing_id = created["id"] + 1000

    foreign = await client.get(
        f"/api/expenses/{created['id']}", headers=bob_headers,
    )
    missing = await client.get(
        f"/api/expenses/{missing_id}", headers=bob_headers,
    )

    assert foreign.status_code == missing.status_code == 404
    foreign_error = foreign.json()["error"]
    missing_error = missing.json()["error"]
    assert foreign_error["code"] == missing_error["code"]
    assert "a@x.com" not in foreign.text


async def test_foreign_update_is_404_and_not_applied(
    client, alice_headers, bob_headers,
):
    created = await _create(client, alice_headers)
    url = f"/api/expenses/{created['id']}"

    response = await client.put(url, json=LATTE, headers=bob_headers)
    assert response.status_code == 404

    response = await client.get(url, headers=alice_headers)
    assert response.json()["description"] == "Coffee"


async def test_foreign_delete_is_404_and_keeps_record(
    client, alice_headers, bob_headers,
):
    created = await _create(client, alice_headers)
    url = f"/api/expenses/{created['id']}"

    response = await client.delete(url, headers=bob_headers)
    assert response.status_code == 404

    response = await client.get(url, headers=alice_headers)
    assert response.status_code == 200


async def test_foreign_expense_is_403_when_denials_exposed(
    client, alice_headers, bob_headers,
):
    created = await _create(client, alice_headers)
    app.dependency_overrides[get_settings] = lambda: Settings(
        expose_ownership_denials=True,
    )

    response = await client.put(
        f"/api/expenses/{created['id']}", json=LATTE, headers=bob_headers,
    )
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "EXPENSE_ACCESS_DENIED"

    response = await client.get(
        f"/api/expenses/{created['id'] + 1000}", headers=bob_headers,
    )
    assert response.status_code == 404


async def test_owner_fields_in_body_are_ignored(
    client, alice_headers, bob_headers, user_b,
):
    body = {**COFFEE, "userId": user_b.id, "user": {"id": user_b.id}}
    created = await _create(client, alice_headers, body)

    response = await client.get("/api/expenses", headers=bob_headers)
    assert response.json() == []
    response = await client.get(
        f"/api/expenses/{created['id']}", headers=alice_headers,
    )
    assert response.status_code == 200


# ─── authentication ──────────────────────────────────────────────

async def test_missing_token_is_401(client):
    response = await client.get("/api/expenses")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["error"]["code"] == "AUTHENTICATION_FAILED"


async def test_garbage_token_is_401(client):
    response = await client.get(
        "/api/expenses", headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


async def test_token_for_unknown_user_is_401(client, auth_headers):
    response = await client.post(
        "/api/expenses", json=COFFEE, headers=auth_headers("nobody@x.com"),
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "IDENTITY_NOT_FOUND"


# ─── validation ──────────────────────────────────────────────────

async def test_missing_required_field_is_400(client, alice_headers):
    body = {k: v for k, v in COFFEE.items() if k != "category"}
    response = await client.post("/api/expenses", json=body, headers=alice_headers)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any("category" in d["field"] for d in error["details"])


async def test_non_numeric_amount_is_400(client, alice_headers):
    response = await client.post(
        "/api/expenses", json={**COFFEE, "amount": "lots"}, headers=alice_headers,
    )
    assert response.status_code == 400


async def test_non_integer_id_is_400(client, alice_headers):
    response = await client.get("/api/expenses/abc", headers=alice_headers)
    assert response.status_code == 400


async def test_id_beyond_integer_column_is_400(client, alice_headers):
    for method in ("get", "delete"):
        response = await getattr(client, method)(
            f"/api/expenses/{2**70}", headers=alice_headers,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    response = await client.put(
        f"/api/expenses/{2**31}", json=LATTE, headers=alice_headers,
    )
    assert response.status_code == 400


async def test_non_positive_id_is_400(client, alice_headers):
    response = await client.get("/api/expenses/0", headers=alice_headers)
    assert response.status_code == 400


async def test_expense_date_beyond_bigint_is_400(client, alice_headers):
    response = await client.post(
        "/api/expenses", json={**COFFEE, "expenseDate": 2**70},
        headers=alice_headers,
    )
    assert response.status_code == 400
    error = response.json()["error"]
    assert any("expenseDate" in d["field"] for d in error["details"])


async def test_computed_float_amount_is_stored_in_cents(client, alice_headers):
    data = await _create(client, alice_headers, {**COFFEE, "amount": 0.1 + 0.2})
    assert data["amount"] == 0.3

"""
Tests for Transactions API endpoints
"""
from decimal import Decimal

from fastapi.testclient import TestClient


RENT = {
    "name": "家賃",
    "amount": "3000",
    "type": "expense",
    "frequency": "monthly",
    "category": "consumption",
    "tag": "housing",
    "payment_method": "bank",
    "date": "2026-10-01",
}


def test_create_and_list(authenticated_client):
    response = authenticated_client.post("/api/v1/transactions/", json=RENT)
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "家賃"
    assert Decimal(data["amount"]) == Decimal("3000")
    assert Decimal(data["daily_value"]) == Decimal("-100")
    assert data["date"] == "2026-10-01"

    listed = authenticated_client.get("/api/v1/transactions/").json()
    assert [tx["id"] for tx in listed] == [data["id"]]


def test_create_validation_error_is_400(authenticated_client):
    response = authenticated_client.post(
        "/api/v1/transactions/", json={**RENT, "frequency": "hourly"}
    )
    assert response.status_code == 400
    assert "периодичность" in response.json()["detail"]


def test_missing_field_is_422(authenticated_client):
    response = authenticated_client.post("/api/v1/transactions/", json={"name": "x"})
    assert response.status_code == 422


def test_update_replaces_fields(authenticated_client):
    tx_id = authenticated_client.post("/api/v1/transactions/", json=RENT).json()["id"]

    response = authenticated_client.put(
        f"/api/v1/transactions/{tx_id}",
        json={"name": "給料", "amount": "250000", "type": "income", "frequency": "monthly",
              "date": "2026-10-25"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "income"
    assert data["category"] is None
    assert data["tag"] is None
    assert data["date"] == "2026-10-25"

    fetched = authenticated_client.get(f"/api/v1/transactions/{tx_id}").json()
    assert Decimal(fetched["amount"]) == Decimal("250000")


def test_delete(authenticated_client):
    tx_id = authenticated_client.post("/api/v1/transactions/", json=RENT).json()["id"]

    assert authenticated_client.delete(f"/api/v1/transactions/{tx_id}").status_code == 200
    assert authenticated_client.get(f"/api/v1/transactions/{tx_id}").status_code == 404
    assert authenticated_client.get("/api/v1/transactions/").json() == []


def test_other_users_transaction_is_404(authenticated_client):
    tx_id = authenticated_client.post("/api/v1/transactions/", json=RENT).json()["id"]

    other = TestClient(authenticated_client.app)
    other.post(
        "/api/v1/auth/register",
        json={"email": "intruder@example.com", "password": "secret123"},
    )

    assert other.get(f"/api/v1/transactions/{tx_id}").status_code == 404
    assert other.put(f"/api/v1/transactions/{tx_id}", json=RENT).status_code == 404
    assert other.delete(f"/api/v1/transactions/{tx_id}").status_code == 404
    assert other.get("/api/v1/transactions/").json() == []


def test_oversized_amount_is_400(authenticated_client):
    response = authenticated_client.post(
        "/api/v1/transactions/", json={**RENT, "amount": "9" * 30}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Слишком большая сумма"
    assert authenticated_client.get("/api/v1/transactions/").json() == []

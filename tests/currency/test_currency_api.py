"""
Tests for the currency reference API.

Runs against a seeded in-memory database through TestClient.
"""

import pytest
from pydantic import ValidationError

from currency.schemas import CurrencyCreate
from database.seed import DEFAULT_CURRENCIES


# =============================================================
# TEST: Schemas
# =============================================================

class TestCurrencySchemas:
    """Request body validation."""

    def test_code_uppercased(self):
        assert CurrencyCreate(code=" sek ", name="Swedish Krona").code == "SEK"

    def test_name_stripped(self):
        assert CurrencyCreate(code="SEK", name="  Swedish Krona ").name == "Swedish Krona"

    @pytest.mark.parametrize("code", ["US", "USDX", "U1D", "", "ÜSD"])
    def test_bad_code_rejected(self, code):
        with pytest.raises(ValidationError):
            CurrencyCreate(code=code, name="Whatever")

    @pytest.mark.parametrize("name", ["", "   ", "x" * 51])
    def test_bad_name_rejected(self, name):
        with pytest.raises(ValidationError):
            CurrencyCreate(code="SEK", name=name)


# =============================================================
# TEST: Read endpoints
# =============================================================

class TestReadCurrencies:

    def test_list_seeded(self, client):
        response = client.get("/api/currencies")

        assert response.status_code == 200
        body = response.json()
        assert [row["code"] for row in body] == [code for code, _name in DEFAULT_CURRENCIES]
        assert body[0]["name"] == "US Dollar"
        assert {"id", "code", "name", "created_at", "updated_at"} <= set(body[0])

    def test_get_by_id(self, client):
        response = client.get("/api/currencies/1")

        assert response.status_code == 200
        assert response.json()["code"] == "USD"

    def test_get_by_id_missing(self, client):
        assert client.get("/api/currencies/9999").status_code == 404

    def test_get_by_code_case_insensitive(self, client):
        response = client.get("/api/currencies/code/jpy")

        assert response.status_code == 200
        assert response.json()["name"] == "Japanese Yen"

    def test_get_by_code_missing(self, client):
        response = client.get("/api/currencies/code/xyz")

        assert response.status_code == 404
        assert response.json()["detail"] == "Currency XYZ not found"


# =============================================================
# TEST: Write endpoints
# =============================================================

class TestCreateCurrency:

    def test_create(self, client):
        response = client.post("/api/currencies", json={"code": "sek", "name": "Swedish Krona"})

        assert response.status_code == 201
        body = response.json()
        assert body["code"] == "SEK"
        assert body["id"] > len(DEFAULT_CURRENCIES)
        assert client.get("/api/currencies/code/SEK").status_code == 200

    def test_create_duplicate_conflict(self, client):
        response = client.post("/api/currencies", json={"code": "usd", "name": "Dollar"})

        assert response.status_code == 409
        assert client.get("/api/currencies/code/USD").json()["name"] == "US Dollar"

    def test_create_invalid_body(self, client):
        assert client.post("/api/currencies", json={"code": "US", "name": "Dollar"}).status_code == 422
        assert client.post("/api/currencies", json={"code": "SEK"}).status_code == 422


class TestUpdateCurrency:

    def test_update(self, client):
        response = client.put("/api/currencies/1", json={"code": "USD", "name": "United States Dollar"})

        assert response.status_code == 200
        assert response.json()["name"] == "United States Dollar"
        assert client.get("/api/currencies/code/usd").json()["name"] == "United States Dollar"

    def test_update_missing(self, client):
        response = client.put("/api/currencies/9999", json={"code": "SEK", "name": "Swedish Krona"})
        assert response.status_code == 404

    def test_update_to_existing_code_conflict(self, client):
        response = client.put("/api/currencies/2", json={"code": "USD", "name": "Euro"})
        assert response.status_code == 409


class TestDeleteCurrency:

    def test_delete(self, client):
        response = client.delete("/api/currencies/3")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/currencies/3").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/api/currencies/9999").status_code == 404


# =============================================================
# TEST: Reference changes reach the price feed
# =============================================================

class TestReferenceChangesAffectFeed:

    def test_new_currency_is_estimated(self, client):
        client.post("/api/currencies", json={"code": "SEK", "name": "Swedish Krona"})

        sek = client.get("/api/bitcoin/price").json()["currencies"]["SEK"]

        assert sek["estimated"] is True
        assert sek["displayName"] == "Swedish Krona"
        assert sek["rate"] == pytest.approx(84123.4567 * 0.5)

    def test_renamed_currency_shown(self, client):
        client.put("/api/currencies/1", json={"code": "USD", "name": "Dollar"})

        usd = client.get("/api/bitcoin/price").json()["currencies"]["USD"]

        assert usd["displayName"] == "Dollar"
        assert usd["estimated"] is False

    def test_deleted_currency_not_estimated(self, client):
        jpy_id = client.get("/api/currencies/code/JPY").json()["id"]
        client.delete(f"/api/currencies/{jpy_id}")

        assert "JPY" not in client.get("/api/bitcoin/price").json()["currencies"]

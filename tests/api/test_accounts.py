"""
Tests for account API endpoints.

These test the HTTP layer: status codes, response format,
and error handling. Business logic is tested in
test_atm_service.py.
"""


SAM = {
    "card": 12345678,
    "pin": 1234,
    "owner_name": "Sam Sepiol",
    "initial_balance": 300.30,
}


class TestRegisterAccount:

    def test_register_returns_201(self, client):
        response = client.post("/accounts", json=SAM)
        assert response.status_code == 201

    def test_register_returns_data(self, client):
        response = client.post("/accounts", json=SAM)
        data = response.json()
        assert data["card"] == 12345678
        assert data["owner_name"] == "Sam Sepiol"
        assert data["balance"] == 300.30
        assert "pin" not in data

    def test_duplicate_returns_409(self, client, atm):
        client.post("/accounts", json=SAM)
        response = client.post("/accounts", json={
            **SAM,
            "owner_name": "Hacker Bob",
            "initial_balance": 10000.00,
        })
        assert response.status_code == 409

        account = atm.get_accounts()[(12345678, 1234)]
        assert account.owner_name == "Sam Sepiol"
        assert account.balance == 300.30

    def test_whitespace_owner_returns_400(self, client):
        response = client.post("/accounts", json={**SAM, "owner_name": "   "})
        assert response.status_code == 400

    def test_empty_owner_returns_422(self, client):
        response = client.post("/accounts", json={**SAM, "owner_name": ""})
        assert response.status_code == 422

    def test_negative_card_returns_422(self, client):
        response = client.post("/accounts", json={**SAM, "card": -1})
        assert response.status_code == 422


class TestCheckBalance:

    def test_balance_returns_200(self, client):
        client.post("/accounts", json=SAM)
        response = client.post("/accounts/balance", json={
            "card": 12345678,
            "pin": 1234,
        })
        assert response.status_code == 200
        assert response.json() == {"card": 12345678, "balance": 300.30}

    def test_wrong_pin_returns_404(self, client):
        client.post("/accounts", json=SAM)
        response = client.post("/accounts/balance", json={
            "card": 12345678,
            "pin": 9999,
        })
        assert response.status_code == 404

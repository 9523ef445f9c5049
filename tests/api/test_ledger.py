"""
Tests for ledger API endpoints.

These test the HTTP layer: status codes, response format,
and error handling. Path confinement itself is tested in
test_atm_service.py.
"""

import pytest


CARD = 44445555
PIN = 6666


@pytest.fixture
def patty(atm):
    atm.register_account(CARD, PIN, "Path Traversal Patty", 10.00)
    atm.deposit_cash(CARD, PIN, 5.00)
    return atm


class TestPrintLedger:

    def test_print_returns_201(self, client, patty, ledger_dir):
        response = client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "patty.txt",
        })
        assert response.status_code == 201

        data = response.json()
        assert data["entries"] == 1
        assert data["path"] == str((ledger_dir / "patty.txt").resolve())

    def test_print_writes_file(self, client, patty, ledger_dir):
        client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "patty.txt",
        })
        content = (ledger_dir / "patty.txt").read_text(encoding="utf-8")
        assert content == "Deposit - Amount: $5.00, Updated Balance: $15.00\n"

    def test_traversal_returns_400(self, client, patty, ledger_dir):
        response = client.post("/ledger/print", json={
            "card": CARD,
            "pin": PIN,
            "path": "../../../VULNERABLE_CONFIG_FILE_LEAK.txt",
        })
        assert response.status_code == 400
        assert "outside the ledger directory" in response.json()["detail"]

    def test_unknown_account_returns_404(self, client):
        response = client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "patty.txt",
        })
        assert response.status_code == 404

    def test_unwritable_path_returns_500(self, client, patty):
        response = client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "missing/patty.txt",
        })
        assert response.status_code == 500

    def test_nul_byte_path_returns_400(self, client, patty):
        response = client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "a\u0000b.txt",
        })
        assert response.status_code == 400

    def test_write_failure_detail_is_generic(self, client, patty, ledger_dir):
        (ledger_dir / "taken").mkdir()
        response = client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "taken",
        })
        assert response.status_code == 500
        assert response.json()["detail"] == "Could not write ledger"

    def test_empty_path_returns_422(self, client, patty):
        response = client.post("/ledger/print", json={
            "card": CARD, "pin": PIN, "path": "",
        })
        assert response.status_code == 422

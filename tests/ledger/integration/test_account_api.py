"""Integration tests for Ledger API endpoints via TestClient."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from ledger.api.errors import register_exception_handlers
from ledger.api.routes import account_router
from ledger.domain import ledger
from ledger.keys import SYSTEM_PROGRAM_ID, new_address


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(account_router)
    register_exception_handlers(app)

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with ledger.domain_context():
            return await call_next(request)

    return TestClient(app)


class TestAirdropAPI:
    def test_airdrop_credits_account(self, client):
        address = new_address()
        response = client.post(f"/accounts/{address}/airdrop", json={"lamports": 5_000})

        assert response.status_code == 200
        body = response.json()
        assert body["address"] == address
        assert body["owner"] == SYSTEM_PROGRAM_ID
        assert body["lamports"] == 5_000
        assert body["data"] == ""

    def test_airdrop_requires_positive_lamports(self, client):
        response = client.post(f"/accounts/{new_address()}/airdrop", json={"lamports": 0})
        assert response.status_code == 422

    def test_airdrop_to_invalid_address(self, client):
        response = client.post("/accounts/not-an-address/airdrop", json={"lamports": 10})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidAddress"


class TestGetAccountAPI:
    def test_get_funded_account(self, client):
        address = new_address()
        client.post(f"/accounts/{address}/airdrop", json={"lamports": 42})

        response = client.get(f"/accounts/{address}")
        assert response.status_code == 200
        assert response.json()["lamports"] == 42

    def test_unknown_account_is_404(self, client):
        response = client.get(f"/accounts/{new_address()}")
        assert response.status_code == 404

    def test_invalid_address_is_400(self, client):
        response = client.get("/accounts/xyz")
        assert response.status_code == 400

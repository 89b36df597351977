"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from instruction_gateway.api.main import create_app
from instruction_gateway.domain.models import Account


# Fixed "current" date for scheduling tests
TODAY = date(2025, 6, 15)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def usd_accounts() -> list[Account]:
    """Two USD accounts: acc1 holds 500, acc2 holds 200"""
    return [
        Account(id="acc1", balance=500, currency="USD"),
        Account(id="acc2", balance=200, currency="USD"),
    ]


@pytest.fixture
def accounts_payload() -> list[dict]:
    """Same two accounts as request JSON"""
    return [
        {"id": "acc1", "balance": 500, "currency": "USD"},
        {"id": "acc2", "balance": 200, "currency": "USD"},
    ]

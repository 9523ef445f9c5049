"""
Shared test fixtures.

Each test gets a fresh AtmService whose ledger directory is a
pytest temporary directory, so printed ledgers never touch the
working tree and no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from atm_ledger.api.deps import get_atm_service
from atm_ledger.main import app
from atm_ledger.services.atm_service import AtmService


@pytest.fixture
def ledger_dir(tmp_path):
    """Directory the service is allowed to write ledgers into."""
    path = tmp_path / "ledgers"
    path.mkdir()
    return path


@pytest.fixture
def atm(ledger_dir):
    """Provide an empty AtmService for direct service testing."""
    return AtmService(ledger_dir=ledger_dir)


@pytest.fixture
def client(atm):
    """
    Provide a test client backed by the test service.

    We override the get_atm_service dependency so the FastAPI
    app uses our fresh service instead of the process-wide one.
    """
    app.dependency_overrides[get_atm_service] = lambda: atm
    yield TestClient(app)
    app.dependency_overrides.clear()

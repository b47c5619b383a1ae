import pytest
from fastapi.testclient import TestClient

import store
from main import app


@pytest.fixture
def client():
    """A fresh browser: no session cookie, empty session store."""
    store.sessions.clear()
    with TestClient(app) as test_client:
        yield test_client
    store.sessions.clear()

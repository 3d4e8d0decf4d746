import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.tests.fixtures.contact import *
from app.tests.fixtures.products import *


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient for the API."""
    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()

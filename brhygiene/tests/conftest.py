import pytest
from fastapi.testclient import TestClient
from brhygiene.main import app
from brhygiene.tests.fixtures.inquiries import *
from brhygiene.tests.fixtures.products import *


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient for the application."""
    with TestClient(app) as c:
        yield c

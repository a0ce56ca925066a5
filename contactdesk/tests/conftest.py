import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from contactdesk.main import app
from contactdesk.api.auth_guard import admin_guard
from contactdesk.tests.fixtures.contact import *
from contactdesk.tests.fixtures.messages import *
from contactdesk.tests.fixtures.supabase import *
from contactdesk.tests.constants.user import UserTestConstants


@pytest.fixture(scope="function")
def mock_admin_user_data():
    """Fixture providing mock admin data as returned by admin_guard."""
    return {
        "sub": UserTestConstants.MOCK_ADMIN_ID.value,
        "email": UserTestConstants.MOCK_ADMIN_EMAIL.value,
        "role": "admin",
    }


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def mock_admin_guard_override(mock_admin_user_data):
    """Fixture providing a mock async function to override admin_guard dependency."""

    async def _mock_admin_guard():
        return mock_admin_user_data

    return _mock_admin_guard


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def admin_client(mock_admin_guard_override):
    """Fixture providing a TestClient with admin_guard dependency overridden."""
    app.dependency_overrides[admin_guard] = mock_admin_guard_override

    with TestClient(app) as c:
        yield c

    # Clean up overrides after the test finished
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient without any auth overrides."""
    app.dependency_overrides.clear()
    with TestClient(app) as c:
        yield c

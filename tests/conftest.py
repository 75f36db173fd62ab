import os

# Set environment variables BEFORE any imports that might use settings
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["EXPOSE_STACK_TRACE"] = "false"

import pytest
from fastapi.testclient import TestClient

from scaffold.core.security import create_access_token
from scaffold.main import app


@pytest.fixture(scope="function")
def client():
    """Test client for the application; server errors come back as responses."""
    yield TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def admin_token() -> str:
    """Get JWT token for a principal holding the admin authority."""
    return create_access_token(data={"sub": "1", "authorities": ["admin"]})


@pytest.fixture(scope="function")
def tenant_token() -> str:
    """Get JWT token for a principal holding only the tenant authority."""
    return create_access_token(data={"sub": "2", "authorities": ["tenant"]})

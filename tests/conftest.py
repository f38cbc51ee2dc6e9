"""Root conftest for tests."""

import os

import pytest

os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ALG"] = "HS256"
os.environ.setdefault("DATABASE_URL", "postgresql://localhost/jobly_test")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    for item in items:
        test_path = str(item.fspath)
        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def admin_token() -> str:
    from auth import security

    return security.build_access_token(username="u1", is_admin=True)


@pytest.fixture
def user_token() -> str:
    from auth import security

    return security.build_access_token(username="u2", is_admin=False)


@pytest.fixture
def client():
    """TestClient without lifespan, so no DB pool is opened."""
    from fastapi.testclient import TestClient

    from main import app

    return TestClient(app)

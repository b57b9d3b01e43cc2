import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_context
from src.api.main import app
from src.components.auth import CreateStaffInput


@pytest.fixture
def client(test_ctx):
    app.dependency_overrides[get_context] = lambda: test_ctx
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def manager(test_ctx):
    return test_ctx.auth_service.create_staff(
        CreateStaffInput(
            name="Morgan Manager",
            username="morgan",
            password="open-sesame",
            role="MANAGER",
            assigned_branch_ids=["b1"],
        )
    )


@pytest.fixture
def logged_in(client, manager):
    response = client.post(
        "/api/auth/login", json={"username": "morgan", "password": "open-sesame"}
    )
    assert response.status_code == 200
    return client

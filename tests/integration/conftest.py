import pytest
from fastapi.testclient import TestClient

from devcamper.bootstrap import create_app
from devcamper.models import UserRole
from devcamper.services.users.user_service import user_service

from tests.conftest import make_settings


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(upload_dir):
    """完整应用 + 内存 SQLite，lifespan 负责建表"""
    config = make_settings(FILE_UPLOAD_PATH=str(upload_dir), RATE_LIMIT_MAX=10_000)
    with TestClient(create_app(config)) as test_client:
        yield test_client


def register(client, name, email, role="user", password="secret123", keep_cookie=False):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": name, "email": email, "password": password, "role": role},
    )
    assert response.status_code == 201, response.text
    if not keep_cookie:
        client.cookies.clear()
    return response.json()["data"]["token"]


def login(client, email, password="secret123"):
    response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    client.cookies.clear()
    return response.json()["data"]["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_token(client):
    client.portal.call(user_service.create_user, "Admin", "admin@devcamper.io", "secret123", UserRole.ADMIN)
    return login(client, "admin@devcamper.io")


@pytest.fixture
def publisher_token(client):
    return register(client, "Publisher", "publisher@devcamper.io", role="publisher")


@pytest.fixture
def user_token(client):
    return register(client, "Student", "student@devcamper.io")


def bootcamp_payload(**overrides):
    payload = {
        "name": "Devworks Bootcamp",
        "description": "Full stack web development",
        "website": "https://devworks.com",
        "careers": ["Web Development", "UI/UX"],
        "average_cost": 10000,
        "housing": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def bootcamp(client, publisher_token):
    response = client.post("/api/v1/bootcamps", json=bootcamp_payload(), headers=bearer(publisher_token))
    assert response.status_code == 201, response.text
    return response.json()["data"]

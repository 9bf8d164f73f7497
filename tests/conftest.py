from datetime import timedelta
from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import EnvironmentMode, Settings
from app.core.security import create_access_token
from app.main import create_app
from app.repositories import UserRepository

SECRET = "test-secret"


def auth_header(email: str, expires_in: Optional[timedelta] = None) -> dict:
    token = create_access_token({"email": email}, SECRET, expires_in=expires_in)
    return {"Authorization": f"Bearer {token}"}


def run_db(client: TestClient, fn):
    """Run ``await fn(session)`` on the app's event loop with a fresh session."""
    async def runner():
        async with client.app.state.database.session_maker() as session:
            return await fn(session)
    return client.portal.call(runner)


def make_admin(client: TestClient, email: str) -> dict:
    r = client.post("/users", json={"email": email, "name": "Admin"})
    assert r.status_code == 200

    async def promote(session):
        users = UserRepository(session)
        user = await users.get_by_email(email)
        await users.promote_to_admin(user.id)

    run_db(client, promote)
    return auth_header(email)


@pytest.fixture(scope="function")
def settings(tmp_path) -> Settings:
    # Fresh SQLite file per test, mock payment gateway
    return Settings(
        _env_file=None,
        env_mode=EnvironmentMode.DEVELOPMENT,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        access_token_secret=SECRET,
    )


@pytest.fixture(scope="function")
def client(settings) -> Generator:
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture(scope="function")
def admin_headers(client) -> dict:
    return make_admin(client, "admin@bistro.com")


@pytest.fixture(scope="function")
def menu_item(client, admin_headers) -> str:
    r = client.post(
        "/menu",
        json={"name": "Caesar Salad", "category": "salad", "price": 12.5, "recipe": "Romaine, croutons"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    return r.json()["insertedId"]

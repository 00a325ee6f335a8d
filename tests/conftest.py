"""
Shared fixtures for the API tests.

Every test gets a fresh application built by the factory against its own
SQLite file, so tests never share users, plants or events.
"""

import asyncio
from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from plant_tracker.core.config import Settings
from plant_tracker.db.session import Database
from plant_tracker.main import create_application

PASSWORD = "longpass1"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        "auto_create_tables": True,
        "strict_ownership": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client; entering it runs the lifespan, which creates the tables."""
    with TestClient(create_application(settings)) as c:
        yield c


@pytest.fixture
def strict_client(tmp_path) -> Generator[TestClient, None, None]:
    app = create_application(make_settings(tmp_path, strict_ownership=True))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict]:
    return make_register(client)


def make_register(client: TestClient) -> Callable[..., dict]:
    """Register a user and return the ``response`` payload (userId, accessToken, ...)."""

    def _register(username: str = "ada", password: str = PASSWORD, email: str = "a@b.com") -> dict:
        res = client.post(
            "/register",
            json={"username": username, "password": password, "email": email},
        )
        assert res.status_code == 201, res.text
        return res.json()["response"]

    return _register


def run_with_session(settings: Settings, fn):
    """Run ``await fn(session)`` against the test database and commit."""

    async def _run():
        database = Database(settings)
        try:
            async with database.session_maker() as session:
                result = await fn(session)
                await session.commit()
                return result
        finally:
            await database.dispose()

    return asyncio.run(_run())

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError

from plant_tracker.core.enums import TokenStatus
from plant_tracker.db.collection import Collection
from plant_tracker.models import User
from plant_tracker.services.accounts import set_token_status

from conftest import PASSWORD, run_with_session


def _count_users(settings) -> int:
    async def _count(session):
        return (await session.execute(select(func.count()).select_from(User))).scalar_one()

    return run_with_session(settings, _count)


def test_register_login_and_empty_listing(client):
    res = client.post(
        "/register",
        json={"username": "ada", "password": "longpass1", "email": "a@b.com"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    registered = body["response"]
    assert registered["username"] == "ada"
    assert registered["email"] == "a@b.com"
    assert len(registered["accessToken"]) == 256
    assert registered["userId"]
    assert "password" not in registered

    res = client.post("/login", json={"username": "ada", "password": "longpass1"})
    assert res.status_code == 200
    login = res.json()
    assert login == {
        "success": True,
        "userId": registered["userId"],
        "username": "ada",
        "accessToken": registered["accessToken"],
    }

    res = client.get("/plants", headers={"Authorization": login["accessToken"]})
    assert res.status_code == 200
    assert res.json() == {"success": True, "response": []}


def test_short_password_is_rejected_and_not_persisted(client, settings):
    res = client.post(
        "/register",
        json={"username": "ada", "password": "short", "email": "a@b.com"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["response"]["code"] == "validation_error"
    assert _count_users(settings) == 0

    # The name is still free
    res = client.post(
        "/register",
        json={"username": "ada", "password": PASSWORD, "email": "a@b.com"},
    )
    assert res.status_code == 201


def test_duplicate_username_is_rejected(client, register, settings):
    register("ada")
    res = client.post(
        "/register",
        json={"username": "ada", "password": "anotherpass", "email": "other@b.com"},
    )
    assert res.status_code == 400
    assert res.json()["response"]["message"] == "Username already exists"
    assert _count_users(settings) == 1


def test_register_requires_all_fields(client):
    res = client.post("/register", json={"username": "ada", "password": PASSWORD})
    assert res.status_code == 400
    error = res.json()["response"]
    assert error["version"] == 1
    assert error["code"] == "validation_error"
    assert {"field": "email", "message": "Field required"} in error["details"]


def test_login_wrong_password_and_unknown_user_look_the_same(client, register):
    register("ada")

    wrong = client.post("/login", json={"username": "ada", "password": "wrongpass"})
    unknown = client.post("/login", json={"username": "bob", "password": PASSWORD})

    assert wrong.status_code == unknown.status_code == 400
    assert wrong.json() == unknown.json()
    assert wrong.json()["response"]["code"] == "credential_mismatch"
    assert "accessToken" not in wrong.text


def test_missing_or_unknown_token_is_rejected(client, register):
    register("ada")

    for headers in ({}, {"Authorization": ""}, {"Authorization": "nope"}):
        res = client.get("/plants", headers=headers)
        assert res.status_code == 401
        assert res.json()["success"] is False
        assert res.json()["response"]["code"] == "authentication_required"


def test_bearer_prefix_is_not_stripped(client, register):
    token = register("ada")["accessToken"]

    res = client.get("/plants", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_rejected_create_has_no_side_effect(client, register):
    token = register("ada")["accessToken"]

    res = client.post("/plants", json={"plantName": "Monstera"}, headers={"Authorization": "bad"})
    assert res.status_code == 401
    res = client.post("/calendarevents", json={"eventTitle": "Water", "startDate": "2026-05-01T10:00:00"})
    assert res.status_code == 401

    headers = {"Authorization": token}
    assert client.get("/plants", headers=headers).json()["response"] == []
    assert client.get("/calendarevents", headers=headers).json()["response"] == []


def test_revoked_token_is_rejected(client, register, settings):
    token = register("ada")["accessToken"]
    headers = {"Authorization": token}
    assert client.get("/plants", headers=headers).status_code == 200

    async def _revoke(session):
        return await set_token_status(session, "ada", TokenStatus.REVOKED)

    assert run_with_session(settings, _revoke) is not None

    assert client.get("/plants", headers=headers).status_code == 401
    res = client.post("/login", json={"username": "ada", "password": PASSWORD})
    assert res.status_code == 401


def test_revoking_unknown_user_returns_none(client, settings):
    async def _revoke(session):
        return await set_token_status(session, "nobody", TokenStatus.REVOKED)

    assert run_with_session(settings, _revoke) is None


def test_store_failure_on_register_is_a_generic_400(client, settings, monkeypatch):
    async def failing_insert(self, values):
        raise OperationalError("INSERT INTO users", {}, Exception("sqlite: disk I/O error"))

    monkeypatch.setattr(Collection, "insert_one", failing_insert)

    res = client.post(
        "/register",
        json={"username": "ada", "password": PASSWORD, "email": "a@b.com"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["response"]["code"] == "backend_unavailable"
    assert body["response"]["version"] == 1
    assert "insert" not in res.text.lower()
    assert "sqlite" not in res.text.lower()
    assert _count_users(settings) == 0


def test_concurrent_duplicate_on_insert_is_username_taken(client, monkeypatch):
    async def conflicting_insert(self, values):
        raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.username"))

    monkeypatch.setattr(Collection, "insert_one", conflicting_insert)

    res = client.post(
        "/register",
        json={"username": "ada", "password": PASSWORD, "email": "a@b.com"},
    )
    assert res.status_code == 400
    error = res.json()["response"]
    assert error["code"] == "validation_error"
    assert error["message"] == "Username already exists"
    assert "UNIQUE" not in res.text

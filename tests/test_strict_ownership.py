"""By-id routes with STRICT_OWNERSHIP on: owner token required, others see 404."""

import pytest

from conftest import make_register


@pytest.fixture
def users(strict_client) -> dict:
    register = make_register(strict_client)
    ada = register("ada")
    bob = register("bob", email="bob@b.com")
    return {
        "ada": {"Authorization": ada["accessToken"]},
        "bob": {"Authorization": bob["accessToken"]},
    }


@pytest.fixture
def plant(strict_client, users) -> dict:
    res = strict_client.post("/plants", json={"plantName": "Fern"}, headers=users["ada"])
    return res.json()["response"]


@pytest.fixture
def event(strict_client, users) -> dict:
    res = strict_client.post(
        "/calendarevents",
        json={"eventTitle": "Mist", "startDate": "2026-06-01T08:00:00"},
        headers=users["ada"],
    )
    return res.json()["response"]


def test_owner_can_use_by_id_routes(strict_client, users, plant, event):
    ada = users["ada"]
    assert strict_client.get(f"/plant/{plant['id']}", headers=ada).status_code == 200
    res = strict_client.patch(f"/plant/{plant['id']}/updated", json={"information": "shade"}, headers=ada)
    assert res.status_code == 200
    res = strict_client.patch(f"/calendarevents/{event['id']}/completed", json={"isCompleted": True}, headers=ada)
    assert res.status_code == 200
    assert strict_client.delete(f"/plant/{plant['id']}", headers=ada).status_code == 200
    assert strict_client.delete(f"/event/{event['id']}", headers=ada).status_code == 200


@pytest.mark.parametrize(
    "method,path,body",
    [
        ("GET", "/plant/{plant}", None),
        ("PATCH", "/plant/{plant}/updated", {"information": "x"}),
        ("DELETE", "/plant/{plant}", None),
        ("PATCH", "/calendarevents/{event}/completed", {"isCompleted": True}),
        ("DELETE", "/event/{event}", None),
    ],
)
def test_by_id_routes_require_token(strict_client, plant, event, method, path, body):
    url = path.format(plant=plant["id"], event=event["id"])
    res = strict_client.request(method, url, json=body)
    assert res.status_code == 401


@pytest.mark.parametrize(
    "method,path,body",
    [
        ("GET", "/plant/{plant}", None),
        ("PATCH", "/plant/{plant}/updated", {"information": "x"}),
        ("DELETE", "/plant/{plant}", None),
        ("PATCH", "/calendarevents/{event}/completed", {"isCompleted": True}),
        ("DELETE", "/event/{event}", None),
    ],
)
def test_other_users_resources_look_missing(strict_client, users, plant, event, method, path, body):
    url = path.format(plant=plant["id"], event=event["id"])
    res = strict_client.request(method, url, json=body, headers=users["bob"])
    assert res.status_code == 404

    # Untouched for the owner
    assert strict_client.get(f"/plant/{plant['id']}", headers=users["ada"]).json()["data"]["information"] is None
    listed = strict_client.get("/calendarevents", headers=users["ada"]).json()["response"]
    assert listed[0]["isCompleted"] is False

import asyncio

from conftest import auth_header
from app.repositories import UserRepository

MISSING_ID = "0123456789abcdef01234567"


def test_create_user_is_idempotent(client, admin_headers):
    r = client.post("/users", json={"email": "jane@example.com", "name": "Jane"})
    assert r.status_code == 200
    assert r.json()["acknowledged"] is True
    assert len(r.json()["insertedId"]) == 24

    r = client.post("/users", json={"email": "jane@example.com", "name": "Jane again"})
    assert r.status_code == 200
    assert r.json() == {"message": "User already exists", "insertedId": None}

    users = client.get("/users", headers=admin_headers).json()
    assert [u["email"] for u in users].count("jane@example.com") == 1


def test_create_user_validates_body(client):
    r = client.post("/users", json={"name": "No email"})
    assert r.status_code == 400
    assert r.json()["message"] == "Email is required"

    r = client.post("/users", json={"email": "not-an-email"})
    assert r.status_code == 400


def test_list_users_exposes_ids_and_roles(client, admin_headers):
    client.post("/users", json={"email": "jane@example.com"})
    users = client.get("/users", headers=admin_headers).json()
    by_email = {u["email"]: u for u in users}
    assert by_email["admin@bistro.com"]["role"] == "admin"
    assert by_email["jane@example.com"]["role"] is None
    assert len(by_email["jane@example.com"]["_id"]) == 24


def test_promote_user(client, admin_headers):
    user_id = client.post("/users", json={"email": "jane@example.com"}).json()["insertedId"]

    r = client.patch(f"/users/admin/{user_id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}

    r = client.get("/users/admin/jane@example.com", headers=auth_header("jane@example.com"))
    assert r.json() == {"admin": True}

    # Already admin: matched but not modified
    r = client.patch(f"/users/{user_id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["modifiedCount"] == 0


def test_promote_requires_admin(client):
    user_id = client.post("/users", json={"email": "jane@example.com"}).json()["insertedId"]
    r = client.patch(f"/users/admin/{user_id}", headers=auth_header("jane@example.com"))
    assert r.status_code == 403


def test_delete_user(client, admin_headers):
    user_id = client.post("/users", json={"email": "jane@example.com"}).json()["insertedId"]

    r = client.delete(f"/users/{user_id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"acknowledged": True, "deletedCount": 1}

    r = client.delete(f"/users/{user_id}", headers=admin_headers)
    assert r.status_code == 404

    emails = [u["email"] for u in client.get("/users", headers=admin_headers).json()]
    assert "jane@example.com" not in emails


def test_promote_missing_user_is_not_found(client, admin_headers):
    r = client.patch(f"/users/{MISSING_ID}", headers=admin_headers)
    assert r.status_code == 404
    assert "message" in r.json()


def test_concurrent_first_sign_ins_create_one_user(client, admin_headers):
    async def sign_in():
        async with client.app.state.database.session_maker() as session:
            user, created = await UserRepository(session).create_if_absent({"email": "jane@example.com"})
            return user.id, created

    async def sign_in_twice():
        return await asyncio.gather(sign_in(), sign_in())

    results = client.portal.call(sign_in_twice)
    assert sorted(created for _, created in results) == [False, True]
    assert results[0][0] == results[1][0]

    users = client.get("/users", headers=admin_headers).json()
    assert [u["email"] for u in users].count("jane@example.com") == 1

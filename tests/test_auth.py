from datetime import timedelta

from conftest import auth_header, make_admin, run_db
from app.repositories import UserRepository


def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["message"] == "Restaurant server is running"

    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "operational"
    assert body["payment_gateway"] == "healthy"


def test_jwt_token_authenticates_as_email(client):
    r = client.post("/jwt", json={"email": "a@x.com"})
    assert r.status_code == 200
    token = r.json()["token"]

    r = client.get("/users/admin/a@x.com", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json() == {"admin": False}


def test_jwt_requires_email(client):
    r = client.post("/jwt", json={"name": "nobody"})
    assert r.status_code == 400
    assert r.json()["message"] == "Email is required"


def test_missing_header_is_refused(client):
    r = client.get("/users/admin/a@x.com")
    assert r.status_code == 401
    assert r.json()["message"] == "Forbidden access"


def test_invalid_token_is_unauthorized(client):
    r = client.get("/users/admin/a@x.com", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401
    assert r.json()["message"] == "Unauthorized access"


def test_expired_token_is_unauthorized(client):
    headers = auth_header("a@x.com", expires_in=timedelta(seconds=-1))
    r = client.get("/users/admin/a@x.com", headers=headers)
    assert r.status_code == 401
    assert r.json()["message"] == "Unauthorized access"


def test_admin_status_of_other_email_is_forbidden(client):
    r = client.get("/users/admin/b@x.com", headers=auth_header("a@x.com"))
    assert r.status_code == 403


def test_admin_status_reports_admin(client):
    headers = make_admin(client, "boss@bistro.com")
    r = client.get("/users/admin/boss@bistro.com", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"admin": True}


def test_admin_route_refuses_regular_and_unknown_users(client):
    client.post("/users", json={"email": "reg@x.com"})
    assert client.get("/users", headers=auth_header("reg@x.com")).status_code == 403
    assert client.get("/users", headers=auth_header("ghost@x.com")).status_code == 403


def test_role_revocation_applies_immediately(client):
    headers = make_admin(client, "boss@bistro.com")
    assert client.get("/admin-stats", headers=headers).status_code == 200

    async def demote(session):
        users = UserRepository(session)
        user = await users.get_by_email("boss@bistro.com")
        await users.update(user.id, {"role": None})

    run_db(client, demote)
    # Same token, role re-read on this request
    assert client.get("/admin-stats", headers=headers).status_code == 403

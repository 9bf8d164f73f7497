import pytest

from conftest import auth_header

MISSING_ID = "0123456789abcdef01234567"


def test_menu_is_public(client, menu_item):
    r = client.get("/menu")
    assert r.status_code == 200
    items = r.json()
    assert len(items) == 1
    assert items[0]["_id"] == menu_item
    assert items[0]["category"] == "salad"

    r = client.get(f"/menu/{menu_item}")
    assert r.status_code == 200
    assert r.json()["name"] == "Caesar Salad"


def test_get_missing_menu_item(client):
    assert client.get(f"/menu/{MISSING_ID}").status_code == 404


def test_menu_writes_require_admin(client, menu_item):
    body = {"name": "Soup", "category": "soup", "price": 5}
    assert client.post("/menu", json=body).status_code == 401
    assert client.post("/menu", json=body, headers=auth_header("user@x.com")).status_code == 403
    assert client.patch(f"/menu/{menu_item}", json={"price": 1}, headers=auth_header("user@x.com")).status_code == 403
    assert client.delete(f"/menu/{menu_item}", headers=auth_header("user@x.com")).status_code == 403


def test_partial_update_keeps_other_fields(client, admin_headers, menu_item):
    r = client.patch(f"/menu/{menu_item}", json={"price": 14.0}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 1}

    item = client.get(f"/menu/{menu_item}").json()
    assert item["price"] == 14.0
    assert item["name"] == "Caesar Salad"
    assert item["recipe"] == "Romaine, croutons"


def test_update_missing_item_is_not_found(client, admin_headers):
    r = client.patch(f"/menu/{MISSING_ID}", json={"price": 1}, headers=admin_headers)
    assert r.status_code == 404


def test_create_menu_item_validates_price(client, admin_headers):
    r = client.post("/menu", json={"name": "Soup", "category": "soup", "price": -1}, headers=admin_headers)
    assert r.status_code == 400


def test_delete_menu_item(client, admin_headers, menu_item):
    r = client.delete(f"/menu/{menu_item}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["deletedCount"] == 1

    r = client.delete(f"/menu/{menu_item}", headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "No document found with the provided ID"


@pytest.mark.parametrize("bad_id", ["123", "not-an-object-id", "g" * 24, "0" * 25])
def test_malformed_ids_are_bad_requests(client, admin_headers, bad_id):
    requests = [
        ("get", f"/menu/{bad_id}", None, None),
        ("patch", f"/menu/{bad_id}", {"price": 1}, admin_headers),
        ("delete", f"/menu/{bad_id}", None, admin_headers),
        ("delete", f"/carts/{bad_id}", None, None),
        ("delete", f"/users/{bad_id}", None, admin_headers),
        ("patch", f"/users/{bad_id}", None, admin_headers),
        ("patch", f"/users/admin/{bad_id}", None, admin_headers),
    ]
    for method, url, body, headers in requests:
        r = client.request(method, url, json=body, headers=headers)
        assert r.status_code == 400, (method, url)
        assert r.json()["message"] == "Invalid ID format"


@pytest.mark.parametrize("field", ["name", "category", "price"])
def test_update_rejects_null_for_required_fields(client, admin_headers, menu_item, field):
    r = client.patch(f"/menu/{menu_item}", json={field: None}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["message"] == f"{field}: must not be null"

    item = client.get(f"/menu/{menu_item}").json()
    assert item["name"] == "Caesar Salad"
    assert item["category"] == "salad"
    assert item["price"] == 12.5


def test_update_accepts_null_for_optional_fields(client, admin_headers, menu_item):
    r = client.patch(f"/menu/{menu_item}", json={"recipe": None}, headers=admin_headers)
    assert r.status_code == 200
    assert client.get(f"/menu/{menu_item}").json()["recipe"] is None

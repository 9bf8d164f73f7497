MISSING_ID = "0123456789abcdef01234567"


def add(client, email, name="Caesar Salad", price=12.5, menu_id=None):
    body = {"email": email, "name": name, "price": price}
    if menu_id:
        body["menuId"] = menu_id
    r = client.post("/carts", json=body)
    assert r.status_code == 200
    return r.json()["insertedId"]


def test_cart_requires_email(client):
    r = client.post("/carts", json={"name": "Soup", "price": 5})
    assert r.status_code == 400
    assert r.json()["message"] == "Email is required"

    r = client.get("/carts")
    assert r.status_code == 400
    assert r.json()["message"] == "Email is required"


def test_cart_listing_is_scoped_by_email(client, menu_item):
    mine = add(client, "jane@example.com", menu_id=menu_item)
    add(client, "john@example.com", name="Soup", price=5)

    r = client.get("/carts", params={"email": "jane@example.com"})
    assert r.status_code == 200
    items = r.json()
    assert [i["_id"] for i in items] == [mine]
    assert items[0]["menuId"] == menu_item
    assert all(i["email"] == "jane@example.com" for i in items)

    assert client.get("/carts", params={"email": "nobody@example.com"}).json() == []


def test_remove_cart_item(client):
    item_id = add(client, "jane@example.com")

    r = client.delete(f"/carts/{item_id}")
    assert r.status_code == 200
    assert r.json() == {"acknowledged": True, "deletedCount": 1}

    assert client.delete(f"/carts/{item_id}").status_code == 404
    assert client.delete(f"/carts/{MISSING_ID}").status_code == 404
    assert client.get("/carts", params={"email": "jane@example.com"}).json() == []


def test_cart_rejects_malformed_menu_id(client):
    r = client.post("/carts", json={"email": "jane@example.com", "menuId": "nope"})
    assert r.status_code == 400

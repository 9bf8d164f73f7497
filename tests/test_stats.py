from conftest import auth_header

MISSING_ID = "0123456789abcdef01234567"


def pay(client, email, price, menu_item_ids):
    r = client.post(
        "/payments",
        json={"email": email, "price": price, "menuItemIds": menu_item_ids},
        headers=auth_header(email),
    )
    assert r.status_code == 200


def test_admin_stats_without_payments(client, admin_headers, menu_item):
    r = client.get("/admin-stats", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"users": 1, "menuItems": 1, "orders": 0, "revenue": 0}


def test_admin_stats_sums_revenue(client, admin_headers, menu_item):
    pay(client, "jane@example.com", 12.5, [menu_item])
    pay(client, "john@example.com", 30.0, [menu_item])

    stats = client.get("/admin-stats", headers=admin_headers).json()
    assert stats["orders"] == 2
    assert stats["revenue"] == 42.5


def test_order_stats_counts_each_occurrence(client, admin_headers, menu_item):
    pay(client, "jane@example.com", 12.5, [menu_item])
    pay(client, "john@example.com", 12.5, [menu_item])

    r = client.get("/order-stats", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == [{"category": "salad", "quantity": 2, "revenue": 25.0}]


def test_order_stats_groups_by_category(client, admin_headers, menu_item):
    soup = client.post(
        "/menu", json={"name": "Soup", "category": "soup", "price": 6.0}, headers=admin_headers
    ).json()["insertedId"]

    # Repeated ids count twice; unknown ids drop out
    pay(client, "jane@example.com", 31.0, [menu_item, menu_item, soup, MISSING_ID])

    stats = {row["category"]: row for row in client.get("/order-stats", headers=admin_headers).json()}
    assert stats["salad"]["quantity"] == 2
    assert stats["salad"]["revenue"] == 25.0
    assert stats["soup"] == {"category": "soup", "quantity": 1, "revenue": 6.0}
    assert len(stats) == 2


def test_stats_require_admin(client):
    headers = auth_header("jane@example.com")
    assert client.get("/admin-stats", headers=headers).status_code == 403
    assert client.get("/order-stats", headers=headers).status_code == 403
    assert client.get("/order-stats").status_code == 401

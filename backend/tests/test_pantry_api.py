from datetime import date, timedelta


def days_from_today(days):
    return (date.today() + timedelta(days=days)).isoformat()


def add_item(client, headers, **fields):
    payload = {"name": "Item", "quantity": 1}
    payload.update(fields)
    response = client.post("/api/v1/pantry", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_item_with_category_mapping(client, auth_headers):
    item = add_item(client, auth_headers, name="Gouda", category="Cheeses", expiry_date=days_from_today(20))
    assert item["category"] == "Dairy"
    assert item["expiry_status"] == "fresh"
    assert item["is_consumed"] is False


def test_expiry_derived_from_scanned_product(client, auth_headers, product):
    item = add_item(client, auth_headers, name="Milk", barcode=product["barcode"])
    assert item["expiry_date"] == days_from_today(7)
    assert item["category"] == "Dairy"
    assert item["unit"] == "ml"


def test_explicit_expiry_wins_over_product_default(client, auth_headers, product):
    item = add_item(client, auth_headers, name="Milk", barcode=product["barcode"], expiry_date=days_from_today(1))
    assert item["expiry_date"] == days_from_today(1)


def test_list_filters_and_stats(client, auth_headers):
    add_item(client, auth_headers, name="Old Yogurt", category="Dairy", expiry_date=days_from_today(-2))
    add_item(client, auth_headers, name="Bread", category="Bakery", expiry_date=days_from_today(1))
    add_item(client, auth_headers, name="Rice", category="Pantry", expiry_date=days_from_today(200))
    add_item(client, auth_headers, name="Salt", category="Condiments")

    listing = client.get("/api/v1/pantry", headers=auth_headers).json()
    assert listing["total"] == 4
    # Soonest expiry first, undated last
    assert [i["name"] for i in listing["items"]] == ["Old Yogurt", "Bread", "Rice", "Salt"]
    assert listing["stats"]["expired"] == 1
    assert listing["stats"]["expiring_soon"] == 1

    expiring = client.get("/api/v1/pantry?expiring=true", headers=auth_headers).json()
    assert [i["name"] for i in expiring["items"]] == ["Bread"]

    expired = client.get("/api/v1/pantry?expired=true", headers=auth_headers).json()
    assert [i["name"] for i in expired["items"]] == ["Old Yogurt"]

    search = client.get("/api/v1/pantry?search=rice", headers=auth_headers).json()
    assert [i["name"] for i in search["items"]] == ["Rice"]

    by_category = client.get("/api/v1/pantry?category=Bakery", headers=auth_headers).json()
    assert [i["name"] for i in by_category["items"]] == ["Bread"]

    stats = client.get("/api/v1/pantry/stats", headers=auth_headers).json()
    assert stats["total"] == 4
    assert stats["by_category"] == {"Dairy": 1, "Bakery": 1, "Pantry": 1, "Condiments": 1}


def test_update_and_delete(client, auth_headers):
    item = add_item(client, auth_headers, name="Pasta", category="Pasta")

    updated = client.put(f"/api/v1/pantry/{item['id']}", headers=auth_headers, json={"quantity": 3, "notes": "top shelf"})
    assert updated.status_code == 200
    assert updated.json()["quantity"] == 3
    assert updated.json()["notes"] == "top shelf"
    assert updated.json()["name"] == "Pasta"

    assert client.delete(f"/api/v1/pantry/{item['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/api/v1/pantry/{item['id']}", headers=auth_headers).status_code == 404


def test_partial_and_total_consumption(client, auth_headers):
    item = add_item(client, auth_headers, name="Eggs", quantity=6)

    partial = client.post(f"/api/v1/pantry/{item['id']}/consume", headers=auth_headers, json={"quantity": 2})
    assert partial.json()["quantity"] == 4
    assert partial.json()["is_consumed"] is False

    total = client.post(f"/api/v1/pantry/{item['id']}/consume", headers=auth_headers, json={})
    assert total.json()["is_consumed"] is True
    assert total.json()["consumed_at"] is not None

    active = client.get("/api/v1/pantry", headers=auth_headers).json()
    assert active["total"] == 0
    consumed = client.get("/api/v1/pantry?consumed=true", headers=auth_headers).json()
    assert [i["name"] for i in consumed["items"]] == ["Eggs"]


def test_items_are_per_user(client, auth_headers, other_headers):
    item = add_item(client, auth_headers, name="Private Cheese")

    assert client.get(f"/api/v1/pantry/{item['id']}", headers=other_headers).status_code == 404
    assert client.get("/api/v1/pantry", headers=other_headers).json()["total"] == 0
    assert client.delete(f"/api/v1/pantry/{item['id']}", headers=other_headers).status_code == 404

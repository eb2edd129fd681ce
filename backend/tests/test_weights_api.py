def test_reading_for_unknown_product_is_stored(client, auth_headers):
    response = client.post("/api/v1/weights/readings", headers=auth_headers, json={
        "barcode": "12345678",
        "weight_value": 100,
        "sensor_id": "ESP32_KITCHEN_01",
    })
    assert response.status_code == 201
    assert response.json()["barcode"] == "12345678"

    current = client.get("/api/v1/weights/12345678/current", headers=auth_headers)
    assert current.status_code == 200
    assert current.json()["weight_value"] == 100

    # The overview still needs the product itself
    assert client.get("/api/v1/products/12345678/overview", headers=auth_headers).status_code == 404


def test_simulated_reading_for_unknown_product_is_stored(client, auth_headers):
    response = client.post("/api/v1/weights/simulate", headers=auth_headers, json={
        "barcode": "87654321",
        "weight_value": 40,
    })
    assert response.status_code == 201


def test_sensor_reading(client, auth_headers, product):
    response = client.post("/api/v1/weights/readings", headers=auth_headers, json={
        "barcode": product["barcode"],
        "weight_value": 482.5,
        "sensor_id": "ESP32_KITCHEN_01",
        "temperature": 21.4,
        "battery_level": 87,
        "signal_strength": -61,
    })
    assert response.status_code == 201
    body = response.json()
    assert body["weight_value"] == 482.5
    assert body["unit"] == "g"
    assert body["sensor_id"] == "ESP32_KITCHEN_01"
    assert body["battery_level"] == 87


def test_reading_validation(client, auth_headers, product):
    base = {"barcode": product["barcode"], "sensor_id": "ESP32_KITCHEN_01"}
    assert client.post("/api/v1/weights/readings", headers=auth_headers,
                       json={**base, "weight_value": 0}).status_code == 422
    assert client.post("/api/v1/weights/readings", headers=auth_headers,
                       json={**base, "weight_value": 10, "battery_level": 120}).status_code == 422


def test_simulated_reading(client, auth_headers, product):
    response = client.post("/api/v1/weights/simulate", headers=auth_headers, json={
        "barcode": product["barcode"],
        "weight_value": 250,
    })
    assert response.status_code == 201
    assert response.json()["sensor_id"] == "ESP32_SIMULATOR"
    assert response.json()["unit"] == "g"


def test_history_newest_first_and_limited(client, auth_headers, product):
    barcode = product["barcode"]
    for hour, value in enumerate([900, 700, 500]):
        client.post("/api/v1/weights/readings", headers=auth_headers, json={
            "barcode": barcode,
            "weight_value": value,
            "sensor_id": "ESP32_KITCHEN_01",
            "recorded_at": f"2026-01-10T0{hour}:00:00",
        })

    history = client.get(f"/api/v1/weights/{barcode}/history", headers=auth_headers).json()
    assert [r["weight_value"] for r in history] == [500, 700, 900]

    limited = client.get(f"/api/v1/weights/{barcode}/history?limit=2", headers=auth_headers).json()
    assert len(limited) == 2

    current = client.get(f"/api/v1/weights/{barcode}/current", headers=auth_headers).json()
    assert current["weight_value"] == 500


def test_history_limit_bounds(client, auth_headers, product):
    url = f"/api/v1/weights/{product['barcode']}/history"
    assert client.get(f"{url}?limit=0", headers=auth_headers).status_code == 422
    assert client.get(f"{url}?limit=101", headers=auth_headers).status_code == 422


def test_current_without_readings(client, auth_headers, product):
    response = client.get(f"/api/v1/weights/{product['barcode']}/current", headers=auth_headers)
    assert response.status_code == 404


def test_readings_are_per_user(client, auth_headers, other_headers, product):
    client.post("/api/v1/weights/simulate", headers=auth_headers, json={
        "barcode": product["barcode"],
        "weight_value": 250,
    })
    history = client.get(f"/api/v1/weights/{product['barcode']}/history", headers=other_headers).json()
    assert history == []

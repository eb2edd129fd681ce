from datetime import date, timedelta


def put_expiry(client, headers, barcode, days_from_today):
    value = (date.today() + timedelta(days=days_from_today)).isoformat()
    return client.put(f"/api/v1/expiry-dates/{barcode}", headers=headers, json={"expiry_date": value})


def test_set_and_get_expiry_date(client, auth_headers):
    response = put_expiry(client, auth_headers, "8001505005707", 10)
    assert response.status_code == 200
    assert response.json()["status"] == "fresh"

    fetched = client.get("/api/v1/expiry-dates/8001505005707", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["barcode"] == "8001505005707"


def test_set_twice_updates_same_entry(client, auth_headers):
    first = put_expiry(client, auth_headers, "8001505005707", 10).json()
    second = put_expiry(client, auth_headers, "8001505005707", -1).json()

    assert second["id"] == first["id"]
    assert second["status"] == "expired"

    listing = client.get("/api/v1/expiry-dates", headers=auth_headers).json()
    assert len(listing) == 1


def test_status_boundaries(client, auth_headers):
    assert put_expiry(client, auth_headers, "11111111", 0).json()["status"] == "expiring_soon"
    assert put_expiry(client, auth_headers, "22222222", 3).json()["status"] == "expiring_soon"
    assert put_expiry(client, auth_headers, "33333333", 4).json()["status"] == "fresh"
    assert put_expiry(client, auth_headers, "44444444", -1).json()["status"] == "expired"


def test_expiry_dates_are_per_user(client, auth_headers, other_headers):
    put_expiry(client, auth_headers, "8001505005707", 5)

    assert client.get("/api/v1/expiry-dates/8001505005707", headers=other_headers).status_code == 404
    assert client.get("/api/v1/expiry-dates", headers=other_headers).json() == []


def test_delete_expiry_date(client, auth_headers):
    put_expiry(client, auth_headers, "8001505005707", 5)

    assert client.delete("/api/v1/expiry-dates/8001505005707", headers=auth_headers).status_code == 204
    assert client.get("/api/v1/expiry-dates/8001505005707", headers=auth_headers).status_code == 404
    assert client.delete("/api/v1/expiry-dates/8001505005707", headers=auth_headers).status_code == 404

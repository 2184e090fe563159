"""Tests for barber domain router."""

from fastapi.testclient import TestClient

# --- GET /barbers ---


def test_list_requires_session(client: TestClient):
    assert client.get("/barbers").status_code == 401


def test_list_forbidden_for_admin(admin_client: TestClient):
    response = admin_client.get("/barbers")

    assert response.status_code == 403
    assert response.json()["type"] == "role_required"


def test_list_by_rating(client_client: TestClient):
    response = client_client.get("/barbers")

    assert response.status_code == 200
    data = response.json()
    assert [b["id"] for b in data] == ["barber1", "barber2"]
    assert data[0]["rating"] == {"average": 5.0, "count": 1}
    assert data[0]["distance_km"] is None
    assert data[0]["profile"]["shop"]["name"] == "Edward's Edge"


def test_list_by_distance(client_client: TestClient):
    response = client_client.get(
        "/barbers", params={"sort_by": "distance", "lat": 34.05, "lng": -118.24}
    )

    data = response.json()
    assert [b["id"] for b in data] == ["barber2", "barber1"]
    assert data[0]["distance_km"] < data[1]["distance_km"]


def test_list_by_distance_without_location_keeps_order(client_client: TestClient):
    response = client_client.get("/barbers", params={"sort_by": "distance"})

    assert [b["id"] for b in response.json()] == ["barber1", "barber2"]


def test_list_rejects_unknown_sort(client_client: TestClient):
    response = client_client.get("/barbers", params={"sort_by": "price"})

    assert response.status_code == 422


def test_barber_may_browse(barber_client: TestClient):
    assert barber_client.get("/barbers").status_code == 200


# --- GET /barbers/{barber_id} ---


def test_barber_page(client_client: TestClient):
    response = client_client.get("/barbers/barber2")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Sweeney Todd"
    assert data["rating"] == {"average": 4.0, "count": 1}
    assert data["reviews"][0]["client_name"] == "John Doe"
    assert [s["id"] for s in data["profile"]["services"]] == ["s2-1", "s2-2"]


def test_barber_views_another_barbers_page(barber_client: TestClient):
    response = barber_client.get("/barbers/barber2")

    assert response.status_code == 200


def test_barber_page_not_found(client_client: TestClient):
    for barber_id in ("nobody", "client1"):
        response = client_client.get(f"/barbers/{barber_id}")

        assert response.status_code == 404
        assert response.json()["type"] == "barber_not_found"


def test_pending_barber_page_is_served(client_client: TestClient):
    response = client_client.get("/barbers/barber3")

    assert response.status_code == 200
    assert response.json()["name"] == "Pending Pete"
    assert response.json()["rating"] == {"average": 0.0, "count": 0}


def test_barber_page_forbidden_for_admin(admin_client: TestClient):
    response = admin_client.get("/barbers/barber1")

    assert response.status_code == 403
    assert response.json()["type"] == "role_required"


# --- GET /barbers/me/dashboard ---


def test_dashboard(barber_client: TestClient):
    response = barber_client.get("/barbers/me/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["user_id"] == "barber1"
    assert data["rating"] == {"average": 5.0, "count": 1}
    names = {a["service_name"] for a in data["appointments"]}
    assert names == {"Classic Cut", "Beard Trim"}
    assert all(a["client_name"] == "John Doe" for a in data["appointments"])


def test_dashboard_forbidden_for_client(client_client: TestClient):
    assert client_client.get("/barbers/me/dashboard").status_code == 403


# --- PUT /barbers/me/profile ---


def _profile_body(**overrides) -> dict:
    body = {
        "bio": "Fresh start",
        "services": [
            {"id": "s1-1", "name": "Classic Cut", "price": 32, "duration": 30},
            {"id": "s1-9", "name": "Kids Cut", "price": 20, "duration": 20},
        ],
        "portfolio": [
            {"id": "p1-9", "type": "video", "url": "https://example.com/v.mp4"}
        ],
        "profile_picture_url": "https://picsum.photos/seed/edward/400",
        "shop": {
            "name": "Edward's Edge",
            "address": "1 New St, New York, NY",
            "location": {"lat": 40.73, "lng": -73.99},
        },
    }
    body.update(overrides)
    return body


def test_replace_profile(barber_client: TestClient):
    response = barber_client.put("/barbers/me/profile", json=_profile_body())

    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == "barber1"
    assert [s["id"] for s in data["services"]] == ["s1-1", "s1-9"]
    assert data["portfolio"][0]["caption"] is None

    page = barber_client.get("/barbers/barber1").json()
    assert page["profile"]["bio"] == "Fresh start"


def test_replace_profile_owner_comes_from_session(barber_client: TestClient):
    response = barber_client.put(
        "/barbers/me/profile", json=_profile_body(user_id="barber2")
    )

    assert response.json()["user_id"] == "barber1"
    assert barber_client.get("/barbers/barber2").json()["profile"]["bio"] != (
        "Fresh start"
    )


def test_replace_profile_rejects_negative_price(barber_client: TestClient):
    body = _profile_body(
        services=[{"id": "s", "name": "Free money", "price": -5, "duration": 10}]
    )

    response = barber_client.put("/barbers/me/profile", json=body)

    assert response.status_code == 422


def test_replace_profile_forbidden_for_client(client_client: TestClient):
    response = client_client.put("/barbers/me/profile", json=_profile_body())

    assert response.status_code == 403

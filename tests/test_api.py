import httpx
import pytest

from carbon_backend.main import app
from carbon_backend.routes.offsets import get_offset_registry
from carbon_backend.services.offsets import OffsetRegistryService


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok", "message": "API is operational"}
    assert client.get("/").text == "Carbon Footprint API is running!"


def test_estimate_commute(client):
    response = client.post("/api/estimate/commute", json={"distance": 100, "vehicleType": "car", "unit": "km"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["activity"] == "commute"
    assert body["vehicleType"] == "car"
    assert body["distance"] == 100
    assert body["co2e"] == pytest.approx(21.0)
    assert body["co2e_unit"] == "kg"
    assert body["source"] == "fallback"


def test_estimate_electricity(client):
    body = client.post("/api/estimate/electricity", json={"energy": "10"}).json()
    assert body["activity"] == "electricity"
    assert body["energy"] == 10
    assert body["co2e"] == pytest.approx(5.0)


def test_estimate_food_unknown_type_uses_vegetables(client):
    body = client.post("/api/estimate/food", json={"foodType": "tofu", "quantity": 3}).json()
    assert body["activity"] == "food"
    assert body["foodType"] == "tofu"
    assert body["quantity"] == 3
    assert body["co2e"] == pytest.approx(6.0)


@pytest.mark.parametrize("distance", ["-5", "", "abc", None])
def test_invalid_distance_is_rejected(client, distance):
    response = client.post("/api/estimate/commute", json={"distance": distance, "vehicleType": "car"})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidQuantity"


def test_oversized_distance_is_rejected(client):
    response = client.post(
        "/api/estimate/commute",
        content='{"distance": ' + "9" * 400 + ', "vehicleType": "car"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidQuantity"


def test_record_rejects_quantity_that_would_overflow_estimate(client):
    response = client.post("/api/records/food", json={"foodType": "beef", "quantity": "1e308"})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidQuantity"


def test_create_record(client):
    response = client.post(
        "/api/records/food",
        params={"on": "2025-01-27"},
        json={"foodType": "beef", "quantity": 2},
    )
    assert response.status_code == 200
    record = response.json()
    assert record["category"] == "food"
    assert record["date"] == "2025-01-27"
    assert record["co2e"] == pytest.approx(54.0)
    assert record["category_fields"] == {"foodType": "beef", "quantity": 2.0, "unit": "kg"}
    assert record["id"]


def test_create_record_rejects_unknown_category(client):
    response = client.post("/api/records/heating", json={"energy": 3})
    assert response.status_code == 422
    assert response.json()["error"] == "UnknownCategory"


def test_aggregate_endpoint(client):
    records = [
        {"id": "1", "category": "commute", "date": "2025-01-27", "co2e": 21.0},
        {"id": "2", "type": "food", "date": "2025-02-01", "co2e": "6"},
        {"id": "3", "category": "electricity", "date": "2025-02-02", "co2e": 0},
    ]
    body = client.post("/api/aggregate", json={"records": records}).json()
    assert body["daily"] == {"2025-01-27": 21.0, "2025-02-01": 6.0}
    assert body["weekly"] == {"2025-01-26": 27.0}
    assert body["by_category"] == {"commute": 21.0, "food": 6.0}
    assert body["total"] == pytest.approx(27.0)


def test_offsets_fall_back_when_registry_is_down(client):
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    app.dependency_overrides[get_offset_registry] = lambda: OffsetRegistryService(
        base_url="https://registry.test", transport=httpx.MockTransport(handler)
    )
    body = client.get("/api/offsets").json()
    assert body["success"] is True
    assert [p["name"] for p in body["projects"]] == [
        "Renewable Energy Project",
        "Reforestation Program",
    ]

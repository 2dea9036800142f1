import pytest

from carservice_shared.db.models import ServiceStation, User


@pytest.mark.api
def test_stations_ordered_with_admin_fields(api_client, catalog, SessionLocal):
    with SessionLocal() as s:
        admin = User(
            email="owner@cityauto.example.com",
            password_hash="x",
            name="Owner",
            role="station_admin",
            service_station_id=1,
        )
        s.add(admin)
        s.flush()
        s.get(ServiceStation, 1).admin_id = admin.id
        s.commit()

    resp = api_client.get("/api/services/stations")

    assert resp.status_code == 200
    stations = resp.json()
    assert [st["name"] for st in stations] == ["City Auto Care", "Premium Car Services"]
    assert stations[0]["admin_name"] == "Owner"
    assert stations[0]["admin_email"] == "owner@cityauto.example.com"
    assert stations[1]["admin_name"] is None


@pytest.mark.api
def test_station_services_have_resolved_prices(api_client, catalog):
    resp = api_client.get("/api/services/station/1")

    assert resp.status_code == 200
    services = {s["name"]: s for s in resp.json()}
    assert services["Oil Change"]["price"] == 49.99
    assert services["Oil Change"]["base_price"] == 59.99
    assert services["Tire Rotation"]["price"] == 29.99


@pytest.mark.api
def test_station_without_overrides_uses_base_prices(api_client, catalog):
    resp = api_client.get("/api/services/station/2")

    assert [(s["name"], s["price"]) for s in resp.json()] == [
        ("Oil Change", 59.99),
        ("Tire Rotation", 29.99),
    ]


@pytest.mark.api
def test_all_services(api_client, catalog):
    resp = api_client.get("/api/services")

    assert resp.status_code == 200
    services = resp.json()
    assert [s["name"] for s in services] == ["Oil Change", "Tire Rotation"]
    assert services[0]["duration_minutes"] == 30
    assert "price" not in services[0]

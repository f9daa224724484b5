"""
Integration tests for the HTTP API

All tests share one client and one SQLite file (see conftest.py); the
offline-data and language tests reset what they depend on.
"""

from unittest.mock import AsyncMock, patch

from tests.scenarios import get_parameters


class TestHealth:

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestYieldEndpoint:

    def test_predict(self, client):
        resp = client.post("/api/yield/predict", json=get_parameters("reference"))

        assert resp.status_code == 200
        body = resp.json()
        assert body["estimated_yield"] == 4.5
        assert body["total_yield"] == 9.0

    def test_defaults_fill_missing_conditions(self, client):
        resp = client.post("/api/yield/predict", json={"crop_type": "wheat"})

        assert resp.status_code == 200
        assert resp.json()["estimated_yield"] == 3.2

    def test_out_of_range_rejected(self, client):
        assert client.post("/api/yield/predict", json=get_parameters("reference", fertilizer=400)).status_code == 422
        assert client.post("/api/yield/predict", json=get_parameters("reference", land_area=0)).status_code == 422
        assert client.post("/api/yield/predict", json=get_parameters("reference", crop_type="")).status_code == 422
        assert client.post("/api/yield/predict", json=get_parameters("reference", land_area_unit="bigha")).status_code == 422


class TestCostEndpoints:

    def test_estimate(self, client):
        resp = client.post("/api/costs/estimate", json={"crop_type": "rice", "land_area": 2})

        assert resp.status_code == 200
        body = resp.json()
        assert body["total_cost"] == 52000
        assert body["break_even_yield"] == 2.6

    def test_calculate(self, client):
        resp = client.post("/api/costs/calculate", json={
            "inputs": {"labor": 50000},
            "market_price": 1000,
            "expected_yield": 10,
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["total_cost"] == 50000
        assert body["profitability"] == "loss"

    def test_negative_input_rejected(self, client):
        resp = client.post("/api/costs/calculate", json={
            "inputs": {"seeds": -1},
            "market_price": 1000,
            "expected_yield": 10,
        })
        assert resp.status_code == 422


class TestWaterEndpoints:

    def test_plan(self, client):
        resp = client.post("/api/water/plan", json={"crop_type": "wheat", "soil_type": "alluvial", "rainfall": 50})

        assert resp.status_code == 200
        body = resp.json()
        assert body["water_stress_risk"] == "low"
        assert len(body["irrigation_schedule"]) == 20

    def test_irrigation(self, client):
        resp = client.post("/api/water/irrigation", json={
            "crop_type": "wheat",
            "soil_type": "alluvial",
            "land_area": 1,
            "flow_rate": 10,
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["water_requirement"] == 4.5
        assert body["water_needed"] == 45.0
        assert body["irrigation_time"] == 75.0
        assert body["water_saved"] == 22.5

    def test_unknown_irrigation_system_rejected(self, client):
        resp = client.post("/api/water/irrigation", json={
            "crop_type": "wheat",
            "soil_type": "alluvial",
            "land_area": 1,
            "irrigation_system": "canal",
        })
        assert resp.status_code == 422


class TestSoilAndAdvisoryEndpoints:

    def test_soil(self, client):
        resp = client.get("/api/soil/sandy")

        assert resp.status_code == 200
        assert resp.json()["health_band"] == "poor"

    def test_rotation(self, client):
        resp = client.get("/api/advisory/rotation", params={"crop_type": "rice", "soil_type": "alluvial"})

        assert resp.status_code == 200
        assert resp.json()["recommended_sequence"][0] == "legumes"

    def test_rotation_requires_soil(self, client):
        assert client.get("/api/advisory/rotation", params={"crop_type": "rice"}).status_code == 422

    def test_pests(self, client):
        resp = client.get("/api/advisory/pests/maize")

        assert resp.status_code == 200
        assert resp.json()["highest_risk"] == "high"

    def test_markets(self, client):
        resp = client.get("/api/advisory/markets/rice")

        assert resp.status_code == 200
        assert len(resp.json()["markets"]) == 5

    def test_report_with_soil(self, client):
        resp = client.post("/api/advisory/report", json=get_parameters("dry_spell"))

        assert resp.status_code == 200
        body = resp.json()
        # rainfall factor 0.5
        assert body["yield_prediction"]["estimated_yield"] == 2.25
        assert body["water"]["water_stress_risk"] == "high"
        assert body["soil"]["texture_class"] == "sandy"
        assert body["rotation"]["current_crop"] == "rice"

    def test_report_economics_agree(self, client):
        body = client.post("/api/advisory/report", json=get_parameters("dry_spell")).json()
        costs = body["costs"]
        profitability = body["profitability"]

        # Baseline estimate prices the average yield
        assert costs["expected_yield"] == 9.0
        assert costs["gross_income"] == costs["expected_yield"] * costs["market_price"]
        # The predicted field yield (4.5 t) is priced separately
        assert body["yield_prediction"]["total_yield"] == 4.5
        assert profitability["total_cost"] == costs["total_cost"] == 52000
        assert profitability["gross_income"] == 4.5 * costs["market_price"]
        assert profitability["net_profit"] == 38000
        assert profitability["profitability"] == "profitable"

    def test_report_without_soil(self, client):
        resp = client.post("/api/advisory/report", json=get_parameters("reference", soil_type=""))

        assert resp.status_code == 200
        body = resp.json()
        assert body["water"] is None
        assert body["soil"] is None
        assert body["rotation"] is None
        assert body["pests"]["crop_type"] == "rice"


class TestCalendarAndWeatherEndpoints:

    def test_calendar(self, client):
        resp = client.get("/api/calendar/rice")

        assert resp.status_code == 200
        body = resp.json()
        assert len(body["events"]) == 11
        assert body["season_start"].endswith("-01")

    def test_forecast(self, client):
        resp = client.get("/api/weather/forecast")

        assert resp.status_code == 200
        body = resp.json()
        assert body["source"] == "simulated"
        assert len(body["forecast"]) == 3

    def test_alerts(self, client):
        assert len(client.get("/api/weather/alerts").json()) == 1
        assert len(client.get("/api/weather/alerts", params={"lat": 28.6, "lng": 77.2}).json()) == 3

    def test_invalid_latitude(self, client):
        assert client.get("/api/weather/forecast", params={"lat": 95}).status_code == 422


class TestLocationEndpoints:

    def test_ip(self, client):
        located = {"lat": 19.07, "lng": 72.87, "address": "Mumbai, Maharashtra, India", "source": "ip"}
        with patch("krishimitra.routers.location.locate_by_ip", AsyncMock(return_value=located)):
            resp = client.get("/api/location/ip")

        assert resp.status_code == 200
        assert resp.json() == located

    def test_short_search(self, client):
        resp = client.get("/api/location/search", params={"q": "ab"})

        assert resp.status_code == 200
        assert resp.json() == []


class TestOfflineDataEndpoints:

    def test_download_lifecycle(self, client):
        client.delete("/api/offline")

        empty = client.get("/api/offline").json()
        assert empty["crops"] == []
        assert empty["last_synced"] is None
        assert empty["storage_used_display"] == "0 KB"
        assert empty["storage_limit_display"] == "50.0 MB"
        assert empty["storage_status"] == "normal"

        first = client.post("/api/offline/download", json={"crop_type": "Rice"}).json()
        assert first["downloaded"] is True
        assert first["offline_data"]["crops"] == ["rice"]
        assert 2.0 <= first["offline_data"]["storage_used"] <= 7.0
        assert first["offline_data"]["last_synced"] is not None

        again = client.post("/api/offline/download", json={"crop_type": "rice"}).json()
        assert again["downloaded"] is False
        assert "already available" in again["message"]
        assert again["offline_data"]["storage_used"] == first["offline_data"]["storage_used"]

        client.post("/api/offline/download", json={"crop_type": "wheat"})
        assert client.get("/api/offline").json()["crops"] == ["rice", "wheat"]

        cleared = client.delete("/api/offline").json()
        assert cleared["crops"] == []
        assert client.get("/api/offline").json()["crops"] == []

    def test_sync_sets_timestamp(self, client):
        client.delete("/api/offline")

        synced = client.post("/api/offline/sync").json()
        assert synced["last_synced"] is not None
        assert synced["crops"] == []


class TestLanguageEndpoints:

    def test_supported_languages(self, client):
        codes = [lang["code"] for lang in client.get("/api/preferences/languages").json()]
        assert codes == ["en", "hi", "bn", "ta", "te"]

    def test_set_and_read(self, client):
        resp = client.put("/api/preferences/language", json={"code": "HI"})

        assert resp.status_code == 200
        assert resp.json()["code"] == "hi"
        assert client.get("/api/preferences/language").json()["code"] == "hi"

        client.put("/api/preferences/language", json={"code": "en"})
        assert client.get("/api/preferences/language").json()["code"] == "en"

    def test_unsupported_language(self, client):
        resp = client.put("/api/preferences/language", json={"code": "fr"})

        assert resp.status_code == 400
        assert "fr" in resp.json()["detail"]

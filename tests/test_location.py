"""
Unit tests for IP geolocation and place search

Outbound calls go through httpx.MockTransport, so no request leaves the test.
"""

import asyncio
from unittest.mock import patch

import httpx

from krishimitra.config import DEFAULT_ADDRESS, DEFAULT_LATITUDE, DEFAULT_LONGITUDE
from krishimitra.services.location import (
    format_address,
    locate_by_ip,
    search_locations,
)

_AsyncClient = httpx.AsyncClient


def mock_client(handler):
    """Patch the module's AsyncClient so every request is answered by `handler`."""
    def factory(**kwargs):
        return _AsyncClient(transport=httpx.MockTransport(handler), **kwargs)
    return patch("krishimitra.services.location.httpx.AsyncClient", side_effect=factory)


def _nominatim_place(place_id, name):
    return {"place_id": place_id, "lat": "18.5204", "lon": "73.8567", "display_name": name}


class TestLocateByIp:
    """Test cases for IP geolocation."""

    def test_success(self):
        def handler(request):
            return httpx.Response(200, json={
                "latitude": 12.9716,
                "longitude": 77.5946,
                "city": "Bengaluru",
                "region": "Karnataka",
                "country_name": "India",
            })

        with mock_client(handler):
            result = asyncio.run(locate_by_ip())

        assert result == {
            "lat": 12.9716,
            "lng": 77.5946,
            "address": "Bengaluru, Karnataka, India",
            "source": "ip",
        }

    def test_http_error_falls_back(self):
        with mock_client(lambda request: httpx.Response(503)):
            result = asyncio.run(locate_by_ip())

        assert result["source"] == "default"
        assert (result["lat"], result["lng"]) == (DEFAULT_LATITUDE, DEFAULT_LONGITUDE)
        assert result["address"] == DEFAULT_ADDRESS

    def test_network_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with mock_client(handler):
            result = asyncio.run(locate_by_ip())

        assert result["source"] == "default"

    def test_missing_coordinates_fall_back(self):
        with mock_client(lambda request: httpx.Response(200, json={"error": True, "reason": "RateLimited"})):
            result = asyncio.run(locate_by_ip())

        assert result["source"] == "default"

    def test_invalid_json_falls_back(self):
        with mock_client(lambda request: httpx.Response(200, text="<html>")):
            result = asyncio.run(locate_by_ip())

        assert result["source"] == "default"


class TestFormatAddress:

    def test_all_parts(self):
        assert format_address("Pune", "Maharashtra", "India") == "Pune, Maharashtra, India"

    def test_missing_region(self):
        assert format_address("Pune", None, "India") == "Pune, India"

    def test_country_only(self):
        assert format_address(None, None, "India") == "India"


class TestSearchLocations:
    """Test cases for forward geocoding."""

    def test_short_term_skips_lookup(self):
        def handler(request):
            raise AssertionError("no request expected")

        with mock_client(handler):
            assert asyncio.run(search_locations("ab")) == []
            assert asyncio.run(search_locations("   ")) == []

    def test_nominatim_results(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[_nominatim_place(282904, "Pune, Maharashtra, India")])

        with mock_client(handler):
            results = asyncio.run(search_locations("Pune"))

        assert results == [{
            "place_id": "282904",
            "lat": 18.5204,
            "lon": 73.8567,
            "display_name": "Pune, Maharashtra, India",
        }]
        assert seen[0].url.host == "nominatim.openstreetmap.org"
        assert seen[0].headers["User-Agent"]

    def test_results_capped(self):
        places = [_nominatim_place(i, f"Place {i}") for i in range(8)]
        with mock_client(lambda request: httpx.Response(200, json=places)):
            results = asyncio.run(search_locations("Place"))

        assert len(results) == 5

    @patch("krishimitra.services.location.OPENCAGE_API_KEY", "test-key")
    def test_opencage_first_when_keyed(self):
        def handler(request):
            assert request.url.host == "api.opencagedata.com"
            return httpx.Response(200, json={"results": [{
                "annotations": {"geohash": "tek0b3"},
                "geometry": {"lat": 18.52, "lng": 73.85},
                "formatted": "Pune, India",
            }]})

        with mock_client(handler):
            results = asyncio.run(search_locations("Pune"))

        assert results == [{"place_id": "tek0b3", "lat": 18.52, "lon": 73.85, "display_name": "Pune, India"}]

    @patch("krishimitra.services.location.OPENCAGE_API_KEY", "test-key")
    def test_opencage_failure_falls_back_to_nominatim(self):
        def handler(request):
            if request.url.host == "api.opencagedata.com":
                return httpx.Response(402, json={"status": {"message": "quota exceeded"}})
            return httpx.Response(200, json=[_nominatim_place(1, "Pune")])

        with mock_client(handler):
            results = asyncio.run(search_locations("Pune"))

        assert [r["display_name"] for r in results] == ["Pune"]

    def test_total_failure_returns_empty(self):
        with mock_client(lambda request: httpx.Response(500)):
            assert asyncio.run(search_locations("Pune")) == []

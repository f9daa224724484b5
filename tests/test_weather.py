"""
Unit tests for the weather service
"""

import asyncio
import random
from datetime import datetime, timedelta
from unittest.mock import patch

import httpx

from krishimitra.services.weather import (
    CONDITIONS,
    get_current_weather,
    mock_conditions,
    weather_alerts,
    weather_forecast,
)

_AsyncClient = httpx.AsyncClient


def mock_client(handler):
    def factory(**kwargs):
        return _AsyncClient(transport=httpx.MockTransport(handler), **kwargs)
    return patch("krishimitra.services.weather.httpx.AsyncClient", side_effect=factory)


class TestMockConditions:

    def test_ranges(self):
        rng = random.Random(3)
        for _ in range(50):
            current = mock_conditions(rng)
            assert 20 <= current["temperature"] <= 34
            assert 50 <= current["humidity"] <= 79
            assert 5 <= current["wind_speed"] <= 24
            assert current["condition"] in CONDITIONS
            assert current["feels_like"] == current["temperature"] - 2


class TestWeatherForecast:
    """Test cases for the forecast with and without a live API key."""

    def test_simulated_without_key(self):
        with patch("krishimitra.services.weather.OPENWEATHERMAP_API_KEY", ""):
            result = asyncio.run(weather_forecast(28.6, 77.2, random.Random(1)))

        assert result["source"] == "simulated"
        assert [day["day"] for day in result["forecast"]] == ["Today", "Tomorrow", "Day 3"]
        assert (result["latitude"], result["longitude"]) == (28.6, 77.2)

    @patch("krishimitra.services.weather.OPENWEATHERMAP_API_KEY", "test-key")
    def test_live_values_override(self):
        def handler(request):
            assert request.url.params["appid"] == "test-key"
            return httpx.Response(200, json={"main": {"temp": 31.5, "humidity": 70}})

        with mock_client(handler):
            result = asyncio.run(weather_forecast(28.6, 77.2, random.Random(1)))

        assert result["source"] == "openweathermap"
        assert result["temperature"] == 31.5
        assert result["humidity"] == 70
        assert result["feels_like"] == 29.5

    @patch("krishimitra.services.weather.OPENWEATHERMAP_API_KEY", "test-key")
    def test_api_error_keeps_simulated_values(self):
        with mock_client(lambda request: httpx.Response(401, json={"cod": 401, "message": "Invalid API key"})):
            assert asyncio.run(get_current_weather(28.6, 77.2)) is None
            result = asyncio.run(weather_forecast(28.6, 77.2, random.Random(1)))

        assert result["source"] == "simulated"


class TestWeatherAlerts:

    NOW = datetime(2026, 7, 1, 6, 0)

    def test_no_location(self):
        alerts = weather_alerts(None, None, now=self.NOW)

        assert len(alerts) == 1
        assert alerts[0]["id"] == "default"
        assert alerts[0]["date"] == self.NOW

    def test_with_location(self):
        alerts = weather_alerts(28.6, 77.2, now=self.NOW)

        assert [a["type"] for a in alerts] == ["rain", "temperature", "wind"]
        assert alerts[1]["severity"] == "high"
        assert alerts[0]["date"] == self.NOW + timedelta(hours=24)

"""
weather.py — Current conditions, short forecast and weather alerts.

Forecasts are fabricated. When an OpenWeatherMap key is configured the
current temperature and humidity come from the API instead, falling back
to the fabricated values if the call fails.
"""

import logging
import random
from datetime import datetime, timedelta

import httpx

from krishimitra.config import HTTP_TIMEOUT_SECONDS, OPENWEATHERMAP_API_KEY, OPENWEATHERMAP_URL

log = logging.getLogger(__name__)

CONDITIONS = ["Sunny", "Cloudy", "Rainy", "Partly Cloudy"]
FORECAST_DAYS = ["Today", "Tomorrow", "Day 3"]


def _mock_temperature(rng: random.Random) -> int:
    return rng.randint(20, 34)


def mock_conditions(rng: random.Random) -> dict:
    temperature = _mock_temperature(rng)
    return {
        "temperature": temperature,
        "humidity": rng.randint(50, 79),
        "wind_speed": rng.randint(5, 24),
        "condition": rng.choice(CONDITIONS),
        "feels_like": temperature - 2,
    }


async def get_current_weather(lat: float, lon: float) -> dict | None:
    """Fetch temperature (C) and humidity (%) from OpenWeatherMap, or None."""
    if not OPENWEATHERMAP_API_KEY:
        return None
    try:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
            resp = await client.get(
                OPENWEATHERMAP_URL,
                params={"lat": lat, "lon": lon, "appid": OPENWEATHERMAP_API_KEY, "units": "metric"},
            )
            data = resp.json()
        return {
            "temperature": data["main"]["temp"],
            "humidity": data["main"]["humidity"],
        }
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        # caller keeps the simulated values
        log.warning("OpenWeatherMap lookup failed: %s", exc)
        return None


async def weather_forecast(lat: float, lon: float, rng: random.Random | None = None) -> dict:
    rng = rng or random.Random()
    current = mock_conditions(rng)

    live = await get_current_weather(lat, lon)
    if live:
        current.update(live)
        current["feels_like"] = live["temperature"] - 2

    forecast = [
        {"day": day, "temperature": _mock_temperature(rng), "condition": rng.choice(CONDITIONS)}
        for day in FORECAST_DAYS
    ]
    return {
        "latitude": lat,
        "longitude": lon,
        **current,
        "source": "openweathermap" if live else "simulated",
        "forecast": forecast,
    }


def weather_alerts(lat: float | None, lon: float | None, now: datetime | None = None) -> list[dict]:
    """Sample alerts for a known location; a single notice otherwise."""
    now = now or datetime.utcnow()
    if lat is None or lon is None:
        return [{
            "id": "default",
            "type": "other",
            "severity": "medium",
            "title": "Location Not Available",
            "description": "Weather alerts are based on your location. "
                           "Enable location services for personalized alerts.",
            "date": now,
        }]

    return [
        {
            "id": "1",
            "type": "rain",
            "severity": "medium",
            "title": "Heavy Rainfall Expected",
            "description": "Heavy rainfall expected in your area over the next 48 hours. Consider "
                           "delaying any planned spraying or fertilizer application.",
            "date": now + timedelta(hours=24),
        },
        {
            "id": "2",
            "type": "temperature",
            "severity": "high",
            "title": "Heat Wave Alert",
            "description": "Temperatures expected to rise above 40°C for the next 3 days. "
                           "Ensure crops have adequate irrigation.",
            "date": now + timedelta(hours=12),
        },
        {
            "id": "3",
            "type": "wind",
            "severity": "low",
            "title": "Moderate Winds",
            "description": "Moderate winds expected. Secure any temporary structures or "
                           "coverings in your farm.",
            "date": now + timedelta(hours=36),
        },
    ]

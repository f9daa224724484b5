"""
routers/weather.py — Forecast and alerts for a location.
"""

from fastapi import APIRouter, Depends, Query

from krishimitra.config import DEFAULT_LATITUDE, DEFAULT_LONGITUDE
from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import WeatherAlertResponse, WeatherForecastResponse
from krishimitra.services.weather import weather_alerts, weather_forecast

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.get("/forecast", response_model=WeatherForecastResponse)
async def get_forecast(
    lat: float = Query(DEFAULT_LATITUDE, ge=-90, le=90),
    lng: float = Query(DEFAULT_LONGITUDE, ge=-180, le=180),
):
    return await weather_forecast(lat, lng)


@router.get("/alerts", response_model=list[WeatherAlertResponse])
async def get_alerts(
    lat: float | None = Query(None, ge=-90, le=90),
    lng: float | None = Query(None, ge=-180, le=180),
):
    return weather_alerts(lat, lng)

"""
routers/calendar.py — Crop stage timeline and season events.
"""

from datetime import date

from fastapi import APIRouter, Depends

from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import FarmingCalendarResponse
from krishimitra.services.farming_calendar import farming_calendar

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.get("/{crop_type}", response_model=FarmingCalendarResponse)
async def get_calendar(crop_type: str, on_date: date | None = None):
    return farming_calendar(crop_type, on_date=on_date)

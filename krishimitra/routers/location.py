"""
routers/location.py — IP geolocation and place search.
"""

from fastapi import APIRouter

from krishimitra.schemas import LocationResponse, LocationResult
from krishimitra.services.location import locate_by_ip, search_locations

router = APIRouter()


@router.get("/ip", response_model=LocationResponse)
async def get_ip_location():
    """Falls back to the default location on any lookup failure."""
    return await locate_by_ip()


@router.get("/search", response_model=list[LocationResult])
async def search(q: str = ""):
    return await search_locations(q)

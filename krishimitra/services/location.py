"""
location.py — IP geolocation and forward geocoding.

Both lookups are best-effort: every failure is logged and answered with the
default location (IP lookup) or an empty result list (search).
"""

import logging
import re

import httpx

from krishimitra.config import (
    DEFAULT_ADDRESS,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    HTTP_TIMEOUT_SECONDS,
    IP_GEOLOCATION_URL,
    NOMINATIM_URL,
    NOMINATIM_USER_AGENT,
    OPENCAGE_API_KEY,
    OPENCAGE_URL,
)

log = logging.getLogger(__name__)

MIN_SEARCH_LENGTH = 3
MAX_RESULTS = 5

LOOKUP_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError)


def default_location() -> dict:
    return {
        "lat": DEFAULT_LATITUDE,
        "lng": DEFAULT_LONGITUDE,
        "address": DEFAULT_ADDRESS,
        "source": "default",
    }


def format_address(city: str | None, region: str | None, country: str | None) -> str:
    """'City, Region, Country' with empty parts collapsed."""
    address = f"{city or ''}, {region or ''}, {country or ''}"
    address = re.sub(r", ,", ",", address)
    return re.sub(r"^,|,$", "", address).strip()


async def locate_by_ip() -> dict:
    """Approximate location of the caller's public IP, or the default."""
    try:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
            resp = await client.get(IP_GEOLOCATION_URL)
            resp.raise_for_status()
            data = resp.json()
    except LOOKUP_ERRORS as exc:
        log.warning("IP geolocation failed, using default location: %s", exc)
        return default_location()

    if not isinstance(data, dict) or not data.get("latitude") or not data.get("longitude"):
        log.info("IP geolocation returned no coordinates, using default location")
        return default_location()

    return {
        "lat": data["latitude"],
        "lng": data["longitude"],
        "address": format_address(data.get("city"), data.get("region"), data.get("country_name")),
        "source": "ip",
    }


async def _search_opencage(client: httpx.AsyncClient, term: str) -> list[dict]:
    resp = await client.get(
        OPENCAGE_URL,
        params={"q": term, "key": OPENCAGE_API_KEY, "limit": MAX_RESULTS},
    )
    resp.raise_for_status()
    return [
        {
            "place_id": str(result["annotations"]["geohash"]),
            "lat": float(result["geometry"]["lat"]),
            "lon": float(result["geometry"]["lng"]),
            "display_name": result["formatted"],
        }
        for result in resp.json().get("results", [])
    ]


async def _search_nominatim(client: httpx.AsyncClient, term: str) -> list[dict]:
    resp = await client.get(
        NOMINATIM_URL,
        params={"format": "json", "q": term, "limit": MAX_RESULTS},
        headers={"User-Agent": NOMINATIM_USER_AGENT},
    )
    resp.raise_for_status()
    return [
        {
            "place_id": str(result["place_id"]),
            "lat": float(result["lat"]),
            "lon": float(result["lon"]),
            "display_name": result["display_name"],
        }
        for result in resp.json()
    ]


async def search_locations(term: str) -> list[dict]:
    """
    Forward-geocode a free-text place name.

    OpenCage is tried first when a key is configured; Nominatim serves as
    the keyless provider and as the fallback. Never raises.
    """
    term = (term or "").strip()
    if len(term) < MIN_SEARCH_LENGTH:
        return []

    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
        if OPENCAGE_API_KEY:
            try:
                return (await _search_opencage(client, term))[:MAX_RESULTS]
            except LOOKUP_ERRORS as exc:
                log.warning("OpenCage search failed, falling back to Nominatim: %s", exc)
        try:
            return (await _search_nominatim(client, term))[:MAX_RESULTS]
        except LOOKUP_ERRORS as exc:
            log.warning("Location search failed: %s", exc)
            return []

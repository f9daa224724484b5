"""
storage.py — Key-value store for the offline crop list and the language
preference. Values are opaque JSON blobs; one row per key, last write wins.
"""

import logging
import random
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from krishimitra.config import (
    DEFAULT_LANGUAGE,
    LANGUAGE_KEY,
    OFFLINE_DATA_KEY,
    OFFLINE_STORAGE_LIMIT_MB,
    SUPPORTED_LANGUAGES,
)
from krishimitra.models import KeyValueEntry
from krishimitra.services.calculation import Band, classify, normalize_key, round_half_up, round_to

log = logging.getLogger(__name__)

# Mocked download size per crop, MB
DOWNLOAD_SIZE_RANGE = (2.0, 7.0)

# Percent of the storage limit in use
STORAGE_USAGE_BANDS = (Band("critical", 80), Band("warning", 50))


class UnsupportedLanguage(ValueError):
    pass


# ── Raw key/value access ─────────────────────────────────────────────────────

async def get_value(db: AsyncSession, key: str) -> dict | None:
    result = await db.execute(select(KeyValueEntry).where(KeyValueEntry.key == key))
    entry = result.scalar_one_or_none()
    return entry.value if entry else None


async def put_value(db: AsyncSession, key: str, value: dict) -> None:
    result = await db.execute(select(KeyValueEntry).where(KeyValueEntry.key == key))
    entry = result.scalar_one_or_none()
    if entry:
        entry.value = value
        entry.updated_at = datetime.utcnow()
    else:
        db.add(KeyValueEntry(key=key, value=value))
    await db.commit()


async def delete_value(db: AsyncSession, key: str) -> None:
    await db.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
    await db.commit()


# ── Offline data ─────────────────────────────────────────────────────────────

def empty_offline_data() -> dict:
    return {
        "crops": [],
        "last_synced": None,
        "storage_used": 0.0,
        "storage_limit": OFFLINE_STORAGE_LIMIT_MB,
    }


def format_storage_size(size_mb: float) -> str:
    if size_mb < 1:
        return f"{round_half_up(size_mb * 1024)} KB"
    return f"{size_mb:.1f} MB"


def storage_percent(used: float, limit: float) -> float:
    if limit <= 0:
        return 0.0
    return used / limit * 100


def describe_offline_data(data: dict) -> dict:
    percent = storage_percent(data["storage_used"], data["storage_limit"])
    return {
        **data,
        "storage_used_display": format_storage_size(data["storage_used"]),
        "storage_limit_display": format_storage_size(data["storage_limit"]),
        "storage_percent": round_to(percent, 1),
        "storage_status": classify(percent, STORAGE_USAGE_BANDS, "normal"),
    }


async def load_offline_data(db: AsyncSession) -> dict:
    data = await get_value(db, OFFLINE_DATA_KEY)
    if not isinstance(data, dict):
        return empty_offline_data()
    return {**empty_offline_data(), **data}


async def download_crop(db: AsyncSession, crop_type: str, rng: random.Random | None = None) -> tuple[dict, bool]:
    """
    Mark a crop's data as available offline.
    Returns (offline data, whether anything was downloaded).
    """
    crop = normalize_key(crop_type)
    data = await load_offline_data(db)
    if crop in data["crops"]:
        log.info("Offline data for %s already downloaded", crop)
        return data, False

    rng = rng or random.Random()
    data["crops"] = data["crops"] + [crop]
    data["last_synced"] = datetime.utcnow().isoformat()
    data["storage_used"] = data["storage_used"] + rng.uniform(*DOWNLOAD_SIZE_RANGE)
    await put_value(db, OFFLINE_DATA_KEY, data)
    log.info("Downloaded offline data for %s (%.1f MB used)", crop, data["storage_used"])
    return data, True


async def sync_offline_data(db: AsyncSession) -> dict:
    data = await load_offline_data(db)
    data["last_synced"] = datetime.utcnow().isoformat()
    await put_value(db, OFFLINE_DATA_KEY, data)
    return data


async def clear_offline_data(db: AsyncSession) -> dict:
    await delete_value(db, OFFLINE_DATA_KEY)
    log.info("Offline data cleared")
    return empty_offline_data()


# ── Language preference ──────────────────────────────────────────────────────

async def get_language(db: AsyncSession) -> str:
    value = await get_value(db, LANGUAGE_KEY)
    if isinstance(value, dict) and value.get("code") in SUPPORTED_LANGUAGES:
        return value["code"]
    return DEFAULT_LANGUAGE


async def set_language(db: AsyncSession, code: str) -> str:
    code = normalize_key(code)
    if code not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguage(code)
    await put_value(db, LANGUAGE_KEY, {"code": code})
    return code

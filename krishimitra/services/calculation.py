"""
calculation.py — The three primitives every advisor is built from:

  1. resolve()       categorical key -> baseline record, default on a miss
  2. scale_record()  area normalization + per-field scaling
  3. classify()      numeric value -> qualitative band

All functions are pure and synchronous.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

T = TypeVar("T")

HECTARES_PER_ACRE = 0.404686
SQUARE_METERS_PER_HECTARE = 10000
SQUARE_METERS_PER_ACRE = 4046.86


class AreaUnit(str, Enum):
    HECTARES = "hectares"
    ACRES = "acres"


# ── Rounding ─────────────────────────────────────────────────────────────────

def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def round_to(value: float, digits: int) -> float:
    """Half-up rounding to a fixed number of decimals."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


# ── Lookup ───────────────────────────────────────────────────────────────────

def normalize_key(key: str | None) -> str:
    return (key or "").strip().lower()


def resolve(key: str | None, table: Mapping[str, T], default: T) -> T:
    """Return table[key], or `default` when the key is unknown. Never raises."""
    return table.get(normalize_key(key), default)


# ── Area normalization ───────────────────────────────────────────────────────

def to_hectares(area: float, unit: AreaUnit | str) -> float:
    if AreaUnit(unit) is AreaUnit.ACRES:
        return area * HECTARES_PER_ACRE
    return area


def to_acres(hectares: float) -> float:
    return hectares / HECTARES_PER_ACRE


def to_square_meters(area: float, unit: AreaUnit | str) -> float:
    if AreaUnit(unit) is AreaUnit.HECTARES:
        return area * SQUARE_METERS_PER_HECTARE
    return area * SQUARE_METERS_PER_ACRE


def scale_record(record: Mapping[str, float], area_ha: float) -> dict[str, int]:
    """Multiply every field of a per-hectare record by the area, rounded."""
    return {field: round_half_up(value * area_ha) for field, value in record.items()}


def lookup_and_scale(
    key: str | None,
    table: Mapping[str, Mapping[str, float]],
    default: Mapping[str, float],
    area: float,
    unit: AreaUnit | str,
) -> dict[str, int]:
    return scale_record(resolve(key, table, default), to_hectares(area, unit))


# ── Classification ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Band:
    label: str
    cutoff: float
    inclusive: bool = False

    def admits(self, value: float) -> bool:
        if self.inclusive:
            return value >= self.cutoff
        return value > self.cutoff


def classify(value: float, bands: tuple[Band, ...], floor_label: str) -> str:
    """
    Scan bands from the most favorable downward and return the first label
    the value satisfies; `floor_label` when none does.
    """
    for band in bands:
        if band.admits(value):
            return band.label
    return floor_label

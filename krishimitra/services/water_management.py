"""
water_management.py — Crop water requirement, weekly irrigation
schedule, water-stress risk and the irrigation calculator.
"""

import math

from krishimitra.services.baselines import (
    CROP_WATER_NEEDS,
    DEFAULT_SEASON_LENGTH,
    DEFAULT_SOIL_WATER_FACTOR,
    DEFAULT_WATER_NEED,
    SEASON_LENGTHS,
    SOIL_WATER_FACTORS,
)
from krishimitra.services.calculation import (
    AreaUnit,
    Band,
    classify,
    normalize_key,
    resolve,
    round_half_up,
    round_to,
    to_square_meters,
)

EFFECTIVE_RAINFALL_RATIO = 0.8

# Weekly balance in mm; 0 and -20 themselves stay in the milder band
WATER_STRESS_BANDS = (Band("low", 0, inclusive=True), Band("medium", -20, inclusive=True))

# Growth stage boundaries as a share of the season's weeks
EARLY_STAGE_SHARE = 0.2
LATE_STAGE_SHARE = 0.7
STAGE_FACTORS = {"early": 0.7, "mid": 1.2, "late": 0.8}

# Days between irrigations
IRRIGATION_FREQUENCY = {"sandy": 2, "clayey": 5}
DEFAULT_IRRIGATION_FREQUENCY = 3
MINUTES_PER_MM = 10

COMMON_TIPS = [
    "Apply mulch around plants to reduce evaporation from soil",
    "Irrigate during early morning or evening to reduce evaporation losses",
    "Maintain your irrigation system to prevent leaks and ensure uniform water application",
]
SOIL_TIPS = {
    "sandy": "Consider adding organic matter to improve water retention in sandy soil",
    "clayey": "Avoid overwatering clay soils to prevent waterlogging and root diseases",
    "alluvial": "Implement contour farming to maximize water utilization in alluvial soils",
    "red": "Use drip irrigation for efficient water use in red soils",
}
CROP_TIPS = {
    "rice": "Consider alternate wetting and drying technique to reduce water use in rice cultivation",
    "wheat": "Schedule irrigation at critical growth stages like crown root initiation, flowering, "
             "and grain filling",
    "sugarcane": "Use trash mulching to conserve soil moisture in sugarcane fields",
    "cotton": "Implement deficit irrigation during vegetative growth to promote deeper root development",
}
STRESS_WARNINGS = {
    "high": "Current conditions indicate high risk of water stress. Immediate irrigation is recommended.",
    "medium": "Moderate water stress risk detected. Monitor soil moisture closely and prepare for irrigation.",
}

# (retention %, label)
SOIL_RETENTION = {
    "clayey": (90, "High"),
    "black": (80, "High"),
    "alluvial": (60, "Medium"),
    "red": (50, "Low"),
    "sandy": (30, "Low"),
}
DEFAULT_SOIL_RETENTION = (60, "Low")

# (demand %, label)
CROP_DEMAND = {
    "rice": (90, "High"),
    "sugarcane": (90, "High"),
    "tomato": (80, "High"),
    "onion": (80, "High"),
    "wheat": (60, "Medium"),
    "maize": (60, "Medium"),
    "cotton": (40, "Low"),
}
DEFAULT_CROP_DEMAND = (70, "Medium")

# Conventional (flood) use is this multiple of the requirement
FLOOD_USE_RATIO = 1.5
SPRINKLER_USE_RATIO = 1.2
IRRIGATION_SYSTEMS = {
    "drip": "Drip irrigation is 90% efficient, saving significant water compared to conventional methods.",
    "sprinkler": "Sprinkler systems are 75% efficient, offering moderate water savings.",
    "flood": "Flood irrigation is only 50% efficient. Consider upgrading to drip or sprinkler systems.",
}


def daily_water_need(crop_type: str, soil_type: str) -> float:
    base = resolve(crop_type, CROP_WATER_NEEDS, DEFAULT_WATER_NEED)
    return base * resolve(soil_type, SOIL_WATER_FACTORS, DEFAULT_SOIL_WATER_FACTOR)


def stage_factor(week: int, weeks_in_season: int) -> float:
    if week < weeks_in_season * EARLY_STAGE_SHARE:
        return STAGE_FACTORS["early"]
    if week > weeks_in_season * LATE_STAGE_SHARE:
        return STAGE_FACTORS["late"]
    return STAGE_FACTORS["mid"]


def irrigation_schedule(daily_need: float, season_length: int, soil_type: str) -> list[dict]:
    weeks = math.ceil(season_length / 7)
    frequency = resolve(soil_type, IRRIGATION_FREQUENCY, DEFAULT_IRRIGATION_FREQUENCY)

    schedule = []
    for week in range(1, weeks + 1):
        weekly_need = daily_need * 7 * stage_factor(week, weeks)
        schedule.append({
            "week": week,
            "water_needed": round_half_up(weekly_need),
            "frequency": frequency,
            "duration": round_half_up(weekly_need / frequency * MINUTES_PER_MM),
        })
    return schedule


def conservation_tips(crop_type: str, soil_type: str) -> list[str]:
    tips = list(COMMON_TIPS)
    soil_tip = SOIL_TIPS.get(normalize_key(soil_type))
    if soil_tip:
        tips.append(soil_tip)
    crop_tip = CROP_TIPS.get(normalize_key(crop_type))
    if crop_tip:
        tips.append(crop_tip)
    return tips


def water_stress_risk(weekly_balance: float) -> str:
    return classify(weekly_balance, WATER_STRESS_BANDS, "high")


def water_plan(crop_type: str, soil_type: str, rainfall: float) -> dict:
    """Daily/seasonal requirement, weekly balance against rainfall and schedule."""
    daily_need = daily_water_need(crop_type, soil_type)
    season_length = resolve(crop_type, SEASON_LENGTHS, DEFAULT_SEASON_LENGTH)
    weekly_balance = rainfall * EFFECTIVE_RAINFALL_RATIO - daily_need * 7
    risk = water_stress_risk(weekly_balance)
    retention, retention_label = resolve(soil_type, SOIL_RETENTION, DEFAULT_SOIL_RETENTION)
    demand, demand_label = resolve(crop_type, CROP_DEMAND, DEFAULT_CROP_DEMAND)

    return {
        "crop_type": crop_type,
        "soil_type": soil_type,
        "rainfall": rainfall,
        "water_requirement": round_to(daily_need, 1),
        "season_length": season_length,
        "total_season_requirement": round_half_up(daily_need * season_length),
        "current_water_balance": round_half_up(weekly_balance),
        "water_stress_risk": risk,
        "stress_warning": STRESS_WARNINGS.get(risk),
        "irrigation_schedule": irrigation_schedule(daily_need, season_length, soil_type),
        "conservation_tips": conservation_tips(crop_type, soil_type),
        "soil_retention": {"percent": retention, "label": retention_label},
        "crop_water_demand": {"percent": demand, "label": demand_label},
    }


def irrigation_requirement(
    water_requirement: float,
    land_area: float,
    land_area_unit: AreaUnit | str,
    flow_rate: float,
    irrigation_system: str = "drip",
) -> dict:
    """
    Daily volume, run time and savings for a field.

    water_requirement: mm per day (1 mm over 1 m² = 1 litre)
    flow_rate: litres per minute
    """
    area_m2 = to_square_meters(land_area, land_area_unit)
    water_needed = water_requirement * area_m2 / 1000  # m³ per day
    irrigation_hours = water_needed * 1000 / (flow_rate * 60)
    conventional_use = water_requirement * FLOOD_USE_RATIO * area_m2 / 1000

    system = normalize_key(irrigation_system)
    if system == "drip":
        water_saved = conventional_use - water_needed
    elif system == "sprinkler":
        water_saved = conventional_use - water_needed * SPRINKLER_USE_RATIO
    else:
        water_saved = 0.0

    return {
        "water_needed": round_to(water_needed, 2),
        "irrigation_time": round_to(irrigation_hours, 2),
        "water_saved": round_to(water_saved, 2),
        "irrigation_system": system,
        "efficiency_note": IRRIGATION_SYSTEMS.get(system, IRRIGATION_SYSTEMS["flood"]),
    }

"""
yield_predictor.py — Rule-based yield estimate.

Each growing condition is expressed as a factor relative to a reference
value (1.0 = reference); the estimate is the crop's base yield times the
product of all factors.
"""

from krishimitra.services.baselines import BASE_YIELDS, DEFAULT_BASE_YIELD
from krishimitra.services.calculation import AreaUnit, resolve, round_to, to_hectares

# Reference conditions
REFERENCE_FERTILIZER = 100  # kg/ha
REFERENCE_RAINFALL = 50     # mm
OPTIMAL_TEMPERATURE = 25    # °C
REFERENCE_HUMIDITY = 60     # %
REFERENCE_SUNLIGHT = 6      # hours

LOW_YIELD_RATIO = 0.7
HIGH_YIELD_RATIO = 1.3
# Factors below this trigger an improvement suggestion
SUGGESTION_THRESHOLD = 0.8

SUGGESTIONS = {
    "fertilizer": "Increase fertilizer application by 20-30% for better nutrient availability.",
    "rainfall": "Implement irrigation to compensate for low rainfall conditions.",
    "temperature": "Consider adjusting planting time to avoid extreme temperatures.",
    "humidity": "Use mulching to retain soil moisture and improve humidity levels.",
    "sunlight": "Ensure proper spacing between plants to maximize sunlight exposure.",
}
OPTIMIZED_MESSAGE = "Your farming practices are already optimized!"


def yield_factors(
    fertilizer: float,
    rainfall: float,
    temperature: float,
    humidity: float,
    sunlight: float,
) -> dict[str, float]:
    return {
        "fertilizer": fertilizer / REFERENCE_FERTILIZER,
        "rainfall": rainfall / REFERENCE_RAINFALL,
        "temperature": 1 - abs(temperature - OPTIMAL_TEMPERATURE) / OPTIMAL_TEMPERATURE,
        "humidity": humidity / REFERENCE_HUMIDITY,
        "sunlight": sunlight / REFERENCE_SUNLIGHT,
    }


def yield_category(estimated: float, base: float) -> str:
    # low is strict (<), so exactly 0.7 x base is still medium
    if estimated < base * LOW_YIELD_RATIO:
        return "low"
    if estimated > base * HIGH_YIELD_RATIO:
        return "high"
    return "medium"


def predict_yield(
    crop_type: str,
    land_area: float,
    land_area_unit: AreaUnit | str = AreaUnit.HECTARES,
    fertilizer: float = 100,
    rainfall: float = 50,
    temperature: float = 25,
    humidity: float = 60,
    sunlight: float = 6,
) -> dict:
    """Estimate yield per hectare and for the whole field."""
    base = resolve(crop_type, BASE_YIELDS, DEFAULT_BASE_YIELD)
    factors = yield_factors(fertilizer, rainfall, temperature, humidity, sunlight)

    estimated = base
    for value in factors.values():
        estimated *= value
    estimated = round_to(estimated, 2)

    suggestions = [
        SUGGESTIONS[name] for name, value in factors.items() if value < SUGGESTION_THRESHOLD
    ]

    area_ha = to_hectares(land_area, land_area_unit)
    return {
        "crop_type": crop_type,
        "base_yield": base,
        "estimated_yield": estimated,
        "yield_category": yield_category(estimated, base),
        "total_yield": round_to(estimated * area_ha, 2),
        "factors": {name: round_to(value, 2) for name, value in factors.items()},
        "suggestions": suggestions or [OPTIMIZED_MESSAGE],
        "land_area": land_area,
        "land_area_unit": AreaUnit(land_area_unit).value,
    }

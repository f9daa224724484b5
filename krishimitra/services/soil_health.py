"""
soil_health.py — Soil health report for a soil type.
"""

import copy

from krishimitra.services.baselines import DEFAULT_SOIL_PROFILE, SOIL_PROFILES
from krishimitra.services.calculation import Band, classify, normalize_key, resolve

# (low, high): below low is "low", above high is "high", otherwise "optimal"
NUTRIENT_RANGES = {
    "nitrogen": (50, 70),
    "phosphorus": (40, 60),
    "potassium": (60, 80),
    "organic_matter": (1.5, 2.5),
}

ACIDIC_PH = 6.5
ALKALINE_PH = 7.5
LOW_ORGANIC_MATTER = 2.0
# Deficiency recommendations fire below these
LOW_NUTRIENTS = {"nitrogen": 60, "phosphorus": 50, "potassium": 60}

# ppm; below is deficient
MICRONUTRIENT_MINIMUMS = {"zinc": 0.5, "iron": 3.0, "manganese": 1.0}
DEFICIENCY_EFFECTS = {
    "zinc": "Deficient - may cause stunted growth and reduced yields",
    "iron": "Deficient - may cause chlorosis (yellowing) of leaves",
    "manganese": "Deficient - may cause interveinal chlorosis and reduced growth",
}
SUFFICIENT = "Sufficient for most crops"

HEALTH_SCORE_BANDS = (Band("good", 80, inclusive=True), Band("fair", 60, inclusive=True))

SANDY_TEXTURE = 60  # % sand
CLAYEY_TEXTURE = 40  # % clay

# (percent, label) per texture class; water and nutrient retention follow
# RETENTION, drainage and aeration follow DRAINAGE
RETENTION = {"clayey": (90, "High"), "sandy": (30, "Low"), "loamy": (60, "Medium")}
DRAINAGE = {"sandy": (90, "High"), "clayey": (30, "Low"), "loamy": (60, "Medium")}
TEXTURE_PROPERTIES = {
    "water_retention": RETENTION,
    "drainage": DRAINAGE,
    "nutrient_retention": RETENTION,
    "aeration": DRAINAGE,
}
TEXTURE_TIPS = {
    "sandy": "Sandy soil: Add organic matter to improve water and nutrient retention. "
             "Consider more frequent irrigation with smaller amounts of water.",
    "clayey": "Clay soil: Improve drainage by adding organic matter and avoiding working the "
              "soil when wet. Consider raised beds for better drainage.",
    "loamy": "Loamy soil: Maintain organic matter levels through regular additions of compost or mulch.",
}


def nutrient_status(value: float, nutrient: str) -> str:
    low, high = NUTRIENT_RANGES.get(nutrient, (0, 0))
    if value < low:
        return "low"
    if value > high:
        return "high"
    return "optimal"


def ph_class(ph: float) -> str:
    if ph < ACIDIC_PH:
        return "acidic"
    if ph > ALKALINE_PH:
        return "alkaline"
    return "neutral"


def texture_class(texture: dict) -> str:
    if texture["sand"] > SANDY_TEXTURE:
        return "sandy"
    if texture["clay"] > CLAYEY_TEXTURE:
        return "clayey"
    return "loamy"


def texture_properties(texture: dict) -> dict[str, dict]:
    """Retention, drainage and aeration indicators derived from the texture class."""
    texture_cls = texture_class(texture)
    properties = {}
    for name, table in TEXTURE_PROPERTIES.items():
        percent, label = table[texture_cls]
        properties[name] = {"percent": percent, "label": label}
    return properties


def micronutrient_status(micronutrients: dict) -> dict[str, str]:
    status = {}
    for name, minimum in MICRONUTRIENT_MINIMUMS.items():
        value = micronutrients.get(name)
        if value is None:
            continue
        status[name] = DEFICIENCY_EFFECTS[name] if value < minimum else SUFFICIENT
    return status


def recommendations(profile: dict, soil_type: str) -> list[str]:
    recs = []

    if profile["ph"] > ALKALINE_PH:
        recs.append("Apply sulfur or gypsum to reduce soil pH")
    elif profile["ph"] < ACIDIC_PH:
        recs.append("Apply agricultural lime to increase soil pH")

    if profile["organic_matter"] < LOW_ORGANIC_MATTER:
        recs.append("Incorporate organic matter through compost or green manure")
    if profile["nitrogen"] < LOW_NUTRIENTS["nitrogen"]:
        recs.append("Apply nitrogen fertilizer or grow nitrogen-fixing cover crops")
    if profile["phosphorus"] < LOW_NUTRIENTS["phosphorus"]:
        recs.append("Apply phosphorus fertilizer or bone meal")
    if profile["potassium"] < LOW_NUTRIENTS["potassium"]:
        recs.append("Apply potassium fertilizer or wood ash")

    soil = normalize_key(soil_type)
    if soil == "sandy":
        recs.append("Improve water retention by adding organic matter")
    elif soil == "clayey":
        recs.append("Improve drainage and aeration through tillage and organic amendments")

    return recs or ["Your soil is in good condition for the selected crop"]


def management_notes(profile: dict) -> dict[str, str]:
    texture = texture_class(profile["texture"])
    if texture == "sandy":
        irrigation = "Frequent irrigation with smaller amounts of water is recommended for sandy soils."
    elif texture == "clayey":
        irrigation = "Avoid overwatering as clay soils have poor drainage. Consider drip irrigation."
    else:
        irrigation = "Moderate irrigation with attention to soil moisture levels is recommended."

    if any(profile[n] < NUTRIENT_RANGES[n][0] for n in ("nitrogen", "phosphorus", "potassium")):
        fertility = ("Apply balanced fertilizer with emphasis on deficient nutrients. "
                     "Consider split applications.")
    else:
        fertility = "Maintain current fertility levels with regular soil testing to monitor changes."

    ph = ph_class(profile["ph"])
    if ph == "acidic":
        ph_note = "Apply agricultural lime to raise pH for optimal nutrient availability."
    elif ph == "alkaline":
        ph_note = "Consider applying sulfur or gypsum to lower pH gradually."
    else:
        ph_note = "Current pH is optimal for most crops. Maintain with regular monitoring."

    return {"irrigation": irrigation, "fertility": fertility, "ph": ph_note}


def soil_health_report(soil_type: str) -> dict:
    """Baseline profile for the soil plus every derived classification."""
    profile = copy.deepcopy(resolve(soil_type, SOIL_PROFILES, DEFAULT_SOIL_PROFILE))
    texture_cls = texture_class(profile["texture"])

    return {
        "soil_type": soil_type,
        **profile,
        "health_band": classify(profile["health_score"], HEALTH_SCORE_BANDS, "poor"),
        "ph_class": ph_class(profile["ph"]),
        "texture_class": texture_cls,
        "texture_properties": texture_properties(profile["texture"]),
        "texture_tip": TEXTURE_TIPS[texture_cls],
        "nutrient_status": {
            name: nutrient_status(profile[name], name) for name in NUTRIENT_RANGES
        },
        "micronutrient_status": micronutrient_status(profile["micronutrients"]),
        "recommendations": recommendations(profile, soil_type),
        "management": management_notes(profile),
    }

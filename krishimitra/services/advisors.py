"""
advisors.py — Crop rotation, pest & disease risk, and market prices.
"""

import random

from krishimitra.services.calculation import resolve, round_to

# ── Crop rotation ────────────────────────────────────────────────────────────

ROTATION_SEQUENCES = {
    "rice": ["legumes", "wheat", "maize", "vegetables"],
    "wheat": ["legumes", "rice", "oilseeds", "vegetables"],
    "maize": ["legumes", "wheat", "vegetables", "oilseeds"],
    "sugarcane": ["legumes", "rice", "vegetables", "wheat"],
    "cotton": ["legumes", "maize", "vegetables", "wheat"],
    "pulses": ["wheat", "rice", "maize", "vegetables"],
    "groundnut": ["wheat", "rice", "vegetables", "maize"],
    "soybean": ["wheat", "rice", "maize", "vegetables"],
    "potato": ["legumes", "maize", "wheat", "vegetables"],
    "onion": ["legumes", "wheat", "maize", "vegetables"],
    "tomato": ["legumes", "wheat", "maize", "vegetables"],
}
DEFAULT_ROTATION = ["legumes", "cereals", "vegetables", "oilseeds"]

ROTATION_BENEFITS = {
    "rice": [
        "Breaks pest and disease cycles",
        "Improves soil fertility",
        "Reduces weed pressure",
        "Diversifies income sources",
    ],
    "wheat": [
        "Reduces soil erosion",
        "Improves soil structure",
        "Breaks pest cycles",
        "Optimizes nutrient utilization",
    ],
    "maize": [
        "Enhances soil organic matter",
        "Reduces pest pressure",
        "Improves water use efficiency",
        "Balances nutrient uptake",
    ],
}
DEFAULT_BENEFITS = [
    "Improves soil health and structure",
    "Reduces pest and disease pressure",
    "Optimizes nutrient utilization",
    "Increases overall farm productivity",
]
ROTATION_TIMEFRAME = "3-4 years rotation cycle"


def crop_rotation(crop_type: str, soil_type: str) -> dict:
    return {
        "current_crop": crop_type,
        "soil_type": soil_type,
        "recommended_sequence": list(resolve(crop_type, ROTATION_SEQUENCES, DEFAULT_ROTATION)),
        "benefits": list(resolve(crop_type, ROTATION_BENEFITS, DEFAULT_BENEFITS)),
        "timeframe": ROTATION_TIMEFRAME,
        "summary": (
            f"This rotation plan is optimized for {soil_type} soil and will help maintain soil "
            f"structure, prevent nutrient depletion, and reduce the buildup of soil-borne "
            f"pathogens specific to {crop_type}."
        ),
    }


# ── Pest & disease ───────────────────────────────────────────────────────────

RISK_ORDER = {"low": 0, "medium": 1, "high": 2}


def _threat(name, risk_level, symptoms, management):
    return {"name": name, "risk_level": risk_level, "symptoms": symptoms, "management": management}


PEST_DISEASE_DATA = {
    "rice": {
        "pests": [
            _threat("Rice Stem Borer", "high",
                    "Dead hearts in vegetative stage, white heads in reproductive stage",
                    "Use resistant varieties, balanced fertilization, proper water management"),
            _threat("Brown Planthopper", "medium",
                    "Yellowing and drying of leaves, honeydew secretion",
                    "Avoid excessive nitrogen, maintain field sanitation, use resistant varieties"),
        ],
        "diseases": [
            _threat("Rice Blast", "high",
                    "Diamond-shaped lesions on leaves, neck blast on panicles",
                    "Use resistant varieties, fungicide application, balanced fertilization"),
            _threat("Bacterial Leaf Blight", "medium",
                    "Water-soaked lesions on leaf margins, yellowing and drying of leaves",
                    "Use resistant varieties, avoid excessive nitrogen, proper spacing"),
        ],
        "current_alerts": [
            "High risk of Rice Blast due to recent rainfall patterns",
            "Monitor for Brown Planthopper in the next 2 weeks",
        ],
    },
    "wheat": {
        "pests": [
            _threat("Aphids", "medium",
                    "Curling of leaves, stunted growth, honeydew secretion",
                    "Early sowing, balanced fertilization, natural enemies conservation"),
            _threat("Termites", "low",
                    "Wilting of plants, hollow stems, poor germination",
                    "Soil treatment, adequate irrigation, removal of crop residues"),
        ],
        "diseases": [
            _threat("Wheat Rust", "high",
                    "Reddish-brown pustules on leaves and stems",
                    "Use resistant varieties, fungicide application, early sowing"),
            _threat("Powdery Mildew", "medium",
                    "White powdery growth on leaves, stems and heads",
                    "Use resistant varieties, fungicide application, proper spacing"),
        ],
        "current_alerts": [
            "Wheat Rust outbreak reported in neighboring regions",
            "Favorable conditions for Powdery Mildew development",
        ],
    },
    "maize": {
        "pests": [
            _threat("Fall Armyworm", "high",
                    "Ragged feeding damage on leaves, frass in whorls",
                    "Early detection, biological control, targeted insecticide application"),
            _threat("Corn Earworm", "medium",
                    "Feeding damage on ear tips, presence of larvae in ears",
                    "Timely planting, biological control, resistant varieties"),
        ],
        "diseases": [
            _threat("Northern Corn Leaf Blight", "medium",
                    "Long, elliptical gray-green lesions on leaves",
                    "Crop rotation, resistant varieties, fungicide application"),
            _threat("Common Rust", "low",
                    "Small, circular to elongate, reddish-brown pustules on leaves",
                    "Resistant varieties, fungicide application, early planting"),
        ],
        "current_alerts": [
            "Fall Armyworm migration expected in the next 10 days",
            "Monitor for early signs of Northern Corn Leaf Blight",
        ],
    },
}
DEFAULT_PEST_DISEASE = {
    "pests": [
        _threat("Generic Pest 1", "medium", "Leaf damage, stunted growth",
                "Integrated pest management, crop rotation"),
        _threat("Generic Pest 2", "low", "Feeding damage on plant parts",
                "Biological control, proper field sanitation"),
    ],
    "diseases": [
        _threat("Generic Disease 1", "medium", "Leaf spots, wilting",
                "Resistant varieties, fungicide application"),
        _threat("Generic Disease 2", "low", "Discoloration, stunted growth",
                "Crop rotation, proper spacing, balanced fertilization"),
    ],
    "current_alerts": ["Monitor for common pests and diseases in your region"],
}


def pest_disease_risk(crop_type: str) -> dict:
    data = resolve(crop_type, PEST_DISEASE_DATA, DEFAULT_PEST_DISEASE)
    threats = data["pests"] + data["diseases"]
    highest = max(threats, key=lambda t: RISK_ORDER[t["risk_level"]])

    return {
        "crop_type": crop_type,
        "pests": [dict(p) for p in data["pests"]],
        "diseases": [dict(d) for d in data["diseases"]],
        "current_alerts": list(data["current_alerts"]),
        "highest_risk": highest["risk_level"],
    }


# ── Market prices ────────────────────────────────────────────────────────────

MARKETS = [
    "Delhi Agricultural Market",
    "Mumbai Wholesale Market",
    "Kolkata Farmers Market",
    "Chennai Agricultural Hub",
    "Bangalore Rural Market",
]


def _trend(rng: random.Random) -> str:
    if rng.random() > 0.6:
        return "up"
    if rng.random() > 0.3:
        return "down"
    return "stable"


def market_prices(crop_type: str, rng: random.Random | None = None) -> dict:
    """Mocked per-market quotes: price, percent change and trend."""
    rng = rng or random.Random()
    markets = []
    for name in MARKETS:
        markets.append({
            "name": name,
            "price": rng.randint(1000, 1999),
            "change": round_to(rng.uniform(-2.5, 2.5), 2),
            "trend": _trend(rng),
        })
    return {"crop_type": crop_type, "markets": markets}

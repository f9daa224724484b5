"""
baselines.py — Per-crop and per-soil baseline constants.

Loaded once at import and treated as read-only by every service; nothing
here is agronomically validated, the figures are demonstration values.
Each table has a matching DEFAULT_* record used for unknown keys.
"""

# ── Yield (tons per hectare) ──────────────────────────────────────────────────
# Potential yield under reference conditions, used by the yield predictor.
BASE_YIELDS = {
    "rice": 4.5,
    "wheat": 3.2,
    "maize": 5.8,
    "sugarcane": 70,
    "cotton": 1.8,
    "jute": 2.5,
    "pulses": 1.2,
    "groundnut": 1.5,
    "soybean": 2.0,
    "mustard": 1.1,
    "sunflower": 1.3,
    "potato": 20,
    "onion": 25,
    "tomato": 30,
    "chilli": 2.5,
    "turmeric": 5.5,
    "ginger": 4.0,
    "banana": 35,
    "mango": 10,
    "coconut": 15,
}
DEFAULT_BASE_YIELD = 3.0

# Average yield the cost calculator assumes when none is supplied.
AVERAGE_YIELDS = {
    "rice": 4.5,
    "wheat": 3.2,
    "maize": 5.8,
    "sugarcane": 70,
    "cotton": 1.8,
    "pulses": 1.2,
    "groundnut": 1.5,
    "soybean": 2.0,
    "potato": 20,
    "onion": 25,
    "tomato": 30,
}
DEFAULT_AVERAGE_YIELD = 3.0

# ── Cost of cultivation (currency units per hectare) ──────────────────────────
COST_COMPONENTS = ("seeds", "fertilizers", "pesticides", "irrigation", "labor", "machinery", "others")

CROP_COSTS = {
    "rice":      {"seeds": 2500, "fertilizers": 5000, "pesticides": 2000, "irrigation": 3000,
                  "labor": 8000, "machinery": 4000, "others": 1500},
    "wheat":     {"seeds": 2000, "fertilizers": 4000, "pesticides": 1500, "irrigation": 2500,
                  "labor": 6000, "machinery": 3500, "others": 1200},
    "maize":     {"seeds": 3000, "fertilizers": 4500, "pesticides": 1800, "irrigation": 2200,
                  "labor": 5500, "machinery": 3000, "others": 1300},
    "sugarcane": {"seeds": 6000, "fertilizers": 7000, "pesticides": 2500, "irrigation": 4000,
                  "labor": 10000, "machinery": 5000, "others": 2000},
    "cotton":    {"seeds": 4000, "fertilizers": 5500, "pesticides": 3000, "irrigation": 3500,
                  "labor": 9000, "machinery": 4500, "others": 1800},
}
DEFAULT_COSTS = {"seeds": 3000, "fertilizers": 5000, "pesticides": 2000, "irrigation": 3000,
                 "labor": 7000, "machinery": 4000, "others": 1500}

# Price per ton
MARKET_PRICES = {
    "rice": 20000,
    "wheat": 22000,
    "maize": 18000,
    "sugarcane": 3000,
    "cotton": 60000,
}
DEFAULT_MARKET_PRICE = 20000

# ── Water (mm per day) ────────────────────────────────────────────────────────
CROP_WATER_NEEDS = {
    "rice": 8.5,
    "wheat": 4.5,
    "maize": 5.0,
    "sugarcane": 7.0,
    "cotton": 5.5,
    "pulses": 3.5,
    "groundnut": 4.0,
    "soybean": 4.2,
    "potato": 4.8,
    "onion": 3.8,
    "tomato": 5.2,
    "chilli": 4.0,
    "turmeric": 5.0,
    "ginger": 4.5,
    "banana": 6.5,
    "mango": 5.0,
}
DEFAULT_WATER_NEED = 5.0

# Multiplier on crop water need; > 1 holds more water
SOIL_WATER_FACTORS = {
    "sandy": 0.7,
    "alluvial": 1.0,
    "black": 1.2,
    "red": 0.9,
    "laterite": 0.8,
    "clayey": 1.3,
}
DEFAULT_SOIL_WATER_FACTOR = 1.0

# Days from sowing to harvest
SEASON_LENGTHS = {
    "rice": 120,
    "wheat": 140,
    "maize": 100,
    "sugarcane": 360,
    "cotton": 180,
    "pulses": 90,
    "groundnut": 120,
    "soybean": 100,
    "potato": 100,
    "onion": 120,
    "tomato": 120,
    "chilli": 150,
    "turmeric": 240,
    "ginger": 240,
    "banana": 300,
    "mango": 120,
}
DEFAULT_SEASON_LENGTH = 120

# ── Soil profiles ─────────────────────────────────────────────────────────────
# Nutrients in kg/ha, micronutrients in ppm, texture in percent.
SOIL_PROFILES = {
    "alluvial": {
        "ph": 7.2, "organic_matter": 2.8,
        "nitrogen": 75, "phosphorus": 65, "potassium": 80,
        "micronutrients": {"zinc": 0.8, "iron": 4.5, "manganese": 2.1, "copper": 0.9, "boron": 0.6},
        "texture": {"sand": 40, "silt": 40, "clay": 20},
        "health_score": 85,
    },
    "black": {
        "ph": 7.8, "organic_matter": 1.9,
        "nitrogen": 60, "phosphorus": 70, "potassium": 90,
        "micronutrients": {"zinc": 0.6, "iron": 3.8, "manganese": 1.8, "copper": 1.1, "boron": 0.5},
        "texture": {"sand": 25, "silt": 30, "clay": 45},
        "health_score": 75,
    },
    "red": {
        "ph": 6.5, "organic_matter": 1.5,
        "nitrogen": 50, "phosphorus": 45, "potassium": 60,
        "micronutrients": {"zinc": 0.5, "iron": 5.2, "manganese": 1.5, "copper": 0.7, "boron": 0.4},
        "texture": {"sand": 60, "silt": 20, "clay": 20},
        "health_score": 65,
    },
    "sandy": {
        "ph": 6.8, "organic_matter": 1.0,
        "nitrogen": 40, "phosphorus": 35, "potassium": 45,
        "micronutrients": {"zinc": 0.4, "iron": 3.0, "manganese": 1.2, "copper": 0.5, "boron": 0.3},
        "texture": {"sand": 80, "silt": 10, "clay": 10},
        "health_score": 55,
    },
    "clayey": {
        "ph": 7.5, "organic_matter": 2.2,
        "nitrogen": 65, "phosphorus": 55, "potassium": 75,
        "micronutrients": {"zinc": 0.7, "iron": 4.0, "manganese": 2.0, "copper": 1.0, "boron": 0.5},
        "texture": {"sand": 20, "silt": 20, "clay": 60},
        "health_score": 70,
    },
}
DEFAULT_SOIL_PROFILE = SOIL_PROFILES["alluvial"]

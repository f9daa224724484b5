"""
config.py — Central configuration for the Krishimitra advisory API.
Everything that varies between deployments is read from the environment
(or a project-level .env) once, at import time.
"""

import os

from dotenv import load_dotenv

# ── Paths ─────────────────────────────────────────────────────────────────────
PACKAGE_DIR  = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(PACKAGE_DIR)

load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# ── Database ──────────────────────────────────────────────────────────────────
# DATABASE_URL wins; otherwise PostgreSQL when POSTGRES_HOST is set,
# and a local SQLite file for development.
DB_USER = os.environ.get("POSTGRES_USER", "krishimitra")
DB_PASS = os.environ.get("POSTGRES_PASSWORD", "krishimitra")
DB_HOST = os.environ.get("POSTGRES_HOST", "")
DB_PORT = os.environ.get("POSTGRES_PORT", "5432")
DB_NAME = os.environ.get("POSTGRES_DB", "krishimitra")

if os.environ.get("DATABASE_URL"):
    DATABASE_URL = os.environ["DATABASE_URL"]
elif DB_HOST:
    DATABASE_URL = f"postgresql+asyncpg://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    DATABASE_URL = f"sqlite+aiosqlite:///{os.path.join(PROJECT_ROOT, 'krishimitra.db')}"

# ── HTTP server ───────────────────────────────────────────────────────────────
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
LOG_LEVEL    = os.environ.get("LOG_LEVEL", "INFO").upper()

# Seconds to wait before answering calculation requests; mimics the
# dashboard's simulated fetch delay. 0 disables it.
SIMULATED_LATENCY_SECONDS = float(os.environ.get("SIMULATED_LATENCY_SECONDS", "0"))

# ── Outbound services ─────────────────────────────────────────────────────────
HTTP_TIMEOUT_SECONDS   = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "5"))
IP_GEOLOCATION_URL     = os.environ.get("IP_GEOLOCATION_URL", "https://ipapi.co/json/")
OPENCAGE_URL           = "https://api.opencagedata.com/geocode/v1/json"
OPENCAGE_API_KEY       = os.environ.get("OPENCAGE_API_KEY", "")
NOMINATIM_URL          = "https://nominatim.openstreetmap.org/search"
NOMINATIM_USER_AGENT   = os.environ.get("NOMINATIM_USER_AGENT", "krishimitra/0.1")
OPENWEATHERMAP_URL     = "https://api.openweathermap.org/data/2.5/weather"
OPENWEATHERMAP_API_KEY = os.environ.get("OPENWEATHERMAP_API_KEY", "")

# ── Location fallback (New Delhi) ─────────────────────────────────────────────
DEFAULT_LATITUDE  = 28.6139
DEFAULT_LONGITUDE = 77.209
DEFAULT_ADDRESS   = "New Delhi, India"

# ── Key-value store ───────────────────────────────────────────────────────────
OFFLINE_DATA_KEY         = "krishimitra_offline_data"
LANGUAGE_KEY             = "language"
OFFLINE_STORAGE_LIMIT_MB = 50
DEFAULT_LANGUAGE         = "en"
SUPPORTED_LANGUAGES = {
    "en": "English",
    "hi": "हिन्दी",
    "bn": "বাংলা",
    "ta": "தமிழ்",
    "te": "తెలుగు",
}

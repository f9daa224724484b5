"""
main.py — FastAPI application entry point.

Creates the key-value table at startup via the lifespan context manager.

Run with:
    uvicorn krishimitra.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from krishimitra import __version__
from krishimitra.config import CORS_ORIGINS, LOG_LEVEL
from krishimitra.database import create_tables
from krishimitra.routers import (
    advisory,
    calendar,
    costs,
    location,
    offline,
    preferences,
    soil,
    water,
    weather,
    yield_prediction,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    log.info("Database tables created.")
    yield


app = FastAPI(title="Krishimitra Advisory API", version=__version__, lifespan=lifespan)

# CORS for the dashboard dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(yield_prediction.router, prefix="/api/yield", tags=["Yield"])
app.include_router(costs.router, prefix="/api/costs", tags=["Costs"])
app.include_router(water.router, prefix="/api/water", tags=["Water"])
app.include_router(soil.router, prefix="/api/soil", tags=["Soil"])
app.include_router(advisory.router, prefix="/api/advisory", tags=["Advisory"])
app.include_router(calendar.router, prefix="/api/calendar", tags=["Calendar"])
app.include_router(weather.router, prefix="/api/weather", tags=["Weather"])
app.include_router(location.router, prefix="/api/location", tags=["Location"])
app.include_router(offline.router, prefix="/api/offline", tags=["Offline Data"])
app.include_router(preferences.router, prefix="/api/preferences", tags=["Preferences"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "version": __version__}

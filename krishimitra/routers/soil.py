"""
routers/soil.py — Soil health report.
"""

from fastapi import APIRouter, Depends

from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import SoilHealthResponse
from krishimitra.services.soil_health import soil_health_report

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.get("/{soil_type}", response_model=SoilHealthResponse)
async def get_soil_health(soil_type: str):
    """Unknown soil types get the alluvial baseline."""
    return soil_health_report(soil_type)

"""
routers/water.py — Water requirement, irrigation schedule and calculator.
"""

from fastapi import APIRouter, Depends

from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import (
    IrrigationRequest,
    IrrigationResponse,
    WaterPlanRequest,
    WaterPlanResponse,
)
from krishimitra.services.calculation import round_to
from krishimitra.services.water_management import (
    daily_water_need,
    irrigation_requirement,
    water_plan,
)

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.post("/plan", response_model=WaterPlanResponse)
async def plan(body: WaterPlanRequest):
    return water_plan(body.crop_type, body.soil_type, body.rainfall)


@router.post("/irrigation", response_model=IrrigationResponse)
async def irrigation(body: IrrigationRequest):
    # Same rounded figure the plan reports, so both views agree
    requirement = round_to(daily_water_need(body.crop_type, body.soil_type), 1)
    result = irrigation_requirement(
        requirement,
        body.land_area,
        body.land_area_unit,
        body.flow_rate,
        body.irrigation_system,
    )
    return {"water_requirement": requirement, **result}

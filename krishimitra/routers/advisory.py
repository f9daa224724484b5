"""
routers/advisory.py — Crop rotation, pest & disease risk, market prices and
the combined advisory report.
"""

import logging

from fastapi import APIRouter, Depends, Query

from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import (
    AdvisoryReport,
    MarketPricesResponse,
    ParameterSet,
    PestDiseaseResponse,
    RotationResponse,
)
from krishimitra.services.advisors import crop_rotation, market_prices, pest_disease_risk
from krishimitra.services.cost_calculator import calculate_profitability, estimate_costs
from krishimitra.services.soil_health import soil_health_report
from krishimitra.services.water_management import water_plan
from krishimitra.services.yield_predictor import predict_yield

log = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.get("/rotation", response_model=RotationResponse)
async def get_rotation(
    crop_type: str = Query(..., min_length=1),
    soil_type: str = Query(..., min_length=1),
):
    return crop_rotation(crop_type, soil_type)


@router.get("/pests/{crop_type}", response_model=PestDiseaseResponse)
async def get_pest_disease(crop_type: str):
    return pest_disease_risk(crop_type)


@router.get("/markets/{crop_type}", response_model=MarketPricesResponse)
async def get_market_prices(crop_type: str):
    return market_prices(crop_type)


@router.post("/report", response_model=AdvisoryReport)
async def full_report(body: ParameterSet):
    """Everything the dashboard shows for one submission of the farm form."""
    prediction = predict_yield(
        crop_type=body.crop_type,
        land_area=body.land_area,
        land_area_unit=body.land_area_unit,
        fertilizer=body.fertilizer,
        rainfall=body.rainfall,
        temperature=body.temperature,
        humidity=body.humidity,
        sunlight=body.sunlight,
    )
    costs = estimate_costs(body.crop_type, body.land_area, body.land_area_unit)
    report = {
        "parameters": body,
        "yield_prediction": prediction,
        "costs": costs,
        # Baseline inputs re-priced against the predicted field yield
        "profitability": calculate_profitability(
            costs["inputs"], costs["market_price"], prediction["total_yield"]
        ),
        "pests": pest_disease_risk(body.crop_type),
    }

    # Soil-dependent sections need a soil type
    if body.soil_type:
        report["water"] = water_plan(body.crop_type, body.soil_type, body.rainfall)
        report["soil"] = soil_health_report(body.soil_type)
        report["rotation"] = crop_rotation(body.crop_type, body.soil_type)

    log.info(
        "Advisory report: crop=%s soil=%s yield=%s (%s)",
        body.crop_type,
        body.soil_type or "-",
        prediction["estimated_yield"],
        prediction["yield_category"],
    )
    return report

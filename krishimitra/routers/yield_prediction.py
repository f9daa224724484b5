"""
routers/yield_prediction.py — Yield estimate for a set of farm parameters.
"""

from fastapi import APIRouter, Depends

from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import ParameterSet, YieldPredictionResponse
from krishimitra.services.yield_predictor import predict_yield

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.post("/predict", response_model=YieldPredictionResponse)
async def predict(body: ParameterSet):
    return predict_yield(
        crop_type=body.crop_type,
        land_area=body.land_area,
        land_area_unit=body.land_area_unit,
        fertilizer=body.fertilizer,
        rainfall=body.rainfall,
        temperature=body.temperature,
        humidity=body.humidity,
        sunlight=body.sunlight,
    )

"""
routers/costs.py — Cost estimate and custom profitability calculation.
"""

from fastapi import APIRouter, Depends

from krishimitra.dependencies import simulated_latency
from krishimitra.schemas import (
    CostEstimateRequest,
    CostEstimateResponse,
    ProfitabilityRequest,
    ProfitabilityResponse,
)
from krishimitra.services.cost_calculator import calculate_profitability, estimate_costs

router = APIRouter(dependencies=[Depends(simulated_latency)])


@router.post("/estimate", response_model=CostEstimateResponse)
async def estimate(body: CostEstimateRequest):
    """Baseline per-component costs scaled to the field."""
    return estimate_costs(
        body.crop_type, body.land_area, body.land_area_unit, body.estimated_yield
    )


@router.post("/calculate", response_model=ProfitabilityResponse)
async def calculate(body: ProfitabilityRequest):
    """Profit, ROI and break-even over user-edited inputs."""
    return calculate_profitability(
        body.inputs.model_dump(), body.market_price, body.expected_yield
    )

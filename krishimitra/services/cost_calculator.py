"""
cost_calculator.py — Cost of cultivation, profit and break-even.

estimate_costs() produces the baseline breakdown for a crop and field size;
calculate_profitability() re-runs the economics over user-edited inputs and
classifies the outcome.
"""

from krishimitra.services.baselines import (
    AVERAGE_YIELDS,
    COST_COMPONENTS,
    CROP_COSTS,
    DEFAULT_AVERAGE_YIELD,
    DEFAULT_COSTS,
    DEFAULT_MARKET_PRICE,
    MARKET_PRICES,
)
from krishimitra.services.calculation import (
    AreaUnit,
    Band,
    classify,
    lookup_and_scale,
    resolve,
    round_to,
    to_hectares,
)

PROFIT_MARGIN_BANDS = (Band("excellent", 20), Band("moderate", 0))
ROI_BANDS = (Band("excellent", 30), Band("moderate", 0))

# Margin (%) at or above which the outlook counts as good
GOOD_MARGIN = 15
SAFE_MARGIN_RATIO = 1.5

ADVICE = {
    "loss": "Your current inputs result in a loss. Consider reducing costs, increasing yield, "
            "or finding better market prices.",
    "low_margin": "Your profit margin is relatively low. Look for ways to reduce input costs "
                  "or improve yield.",
    "good_margin": "Your current inputs show good profit potential. Focus on maintaining "
                   "yield and quality.",
}
HIGHEST_COST_TIPS = {
    "labor": "Labor is your highest cost. Consider mechanization where possible to reduce "
             "labor costs.",
    "fertilizers": "Fertilizers are your highest cost. Consider soil testing to optimize "
                   "fertilizer application.",
}
DEFAULT_HIGHEST_COST_TIP = "Focus on reducing your highest cost inputs while maintaining productivity."


def _ratio_percent(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100


def estimate_costs(
    crop_type: str,
    land_area: float,
    land_area_unit: AreaUnit | str = AreaUnit.HECTARES,
    estimated_yield: float | None = None,
) -> dict:
    """Baseline cost breakdown scaled to the field, with expected economics."""
    area_ha = to_hectares(land_area, land_area_unit)
    inputs = lookup_and_scale(crop_type, CROP_COSTS, DEFAULT_COSTS, land_area, land_area_unit)
    market_price = resolve(crop_type, MARKET_PRICES, DEFAULT_MARKET_PRICE)

    total_cost = sum(inputs.values())
    average_yield = resolve(crop_type, AVERAGE_YIELDS, DEFAULT_AVERAGE_YIELD) * area_ha
    gross_income = average_yield * market_price
    net_profit = gross_income - total_cost

    return {
        "crop_type": crop_type,
        "area_hectares": area_ha,
        "inputs": inputs,
        "total_cost": total_cost,
        "market_price": market_price,
        "expected_yield": estimated_yield if estimated_yield else average_yield,
        "gross_income": gross_income,
        "net_profit": net_profit,
        "profit_margin": round_to(_ratio_percent(net_profit, gross_income), 1),
        "return_on_investment": round_to(_ratio_percent(net_profit, total_cost), 1),
        "break_even_yield": round_to(total_cost / market_price, 2),
    }


def highest_cost_tip(inputs: dict[str, float]) -> str:
    # max() keeps the first of equal values, i.e. component order breaks ties
    highest = max(COST_COMPONENTS, key=lambda name: inputs.get(name, 0))
    return HIGHEST_COST_TIPS.get(highest, DEFAULT_HIGHEST_COST_TIP)


def break_even_status(expected_yield: float, break_even_yield: float) -> str:
    if expected_yield > break_even_yield * SAFE_MARGIN_RATIO:
        return "safe_margin"
    if expected_yield > break_even_yield:
        return "above_break_even"
    return "below_break_even"


def margin_advice(net_profit: float, profit_margin: float) -> str:
    if net_profit < 0:
        return ADVICE["loss"]
    if profit_margin < GOOD_MARGIN:
        return ADVICE["low_margin"]
    return ADVICE["good_margin"]


def calculate_profitability(
    inputs: dict[str, float],
    market_price: float,
    expected_yield: float,
) -> dict:
    """
    Economics over user-supplied cost inputs.

    inputs: cost per component for the whole field (missing components count as 0)
    market_price: price per ton
    expected_yield: tons for the whole field
    """
    total_cost = sum(inputs.get(name, 0) for name in COST_COMPONENTS)
    gross_income = expected_yield * market_price
    net_profit = gross_income - total_cost

    profit_margin = round_to(_ratio_percent(net_profit, gross_income), 1)
    roi = round_to(_ratio_percent(net_profit, total_cost), 1)
    break_even = round_to(total_cost / market_price, 2) if market_price > 0 else 0.0

    return {
        "total_cost": total_cost,
        "gross_income": gross_income,
        "net_profit": net_profit,
        "profit_margin": profit_margin,
        "return_on_investment": roi,
        "break_even_yield": break_even,
        "profitability": "profitable" if net_profit > 0 else "loss",
        "margin_band": classify(profit_margin, PROFIT_MARGIN_BANDS, "poor"),
        "roi_band": classify(roi, ROI_BANDS, "poor"),
        "break_even_status": break_even_status(expected_yield, break_even),
        "advice": [margin_advice(net_profit, profit_margin), highest_cost_tip(inputs)],
    }

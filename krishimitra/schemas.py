"""
schemas.py — Pydantic request/response models for all API endpoints.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from krishimitra.services.calculation import AreaUnit


# ── Farm parameters ──────────────────────────────────────────────────────────

class ParameterSet(BaseModel):
    crop_type: str = Field(min_length=1)
    soil_type: str = ""
    land_area: float = Field(default=1, gt=0)
    land_area_unit: AreaUnit = AreaUnit.HECTARES
    fertilizer: float = Field(default=100, ge=0, le=300)    # kg/ha
    rainfall: float = Field(default=50, ge=0, le=200)       # mm
    temperature: float = Field(default=25, ge=0, le=50)     # °C
    humidity: float = Field(default=60, ge=0, le=100)       # %
    sunlight: float = Field(default=6, ge=0, le=12)         # hours/day
    historical_yield: float | None = Field(default=None, ge=0)

    model_config = {"frozen": True}


# ── Yield ────────────────────────────────────────────────────────────────────

class YieldPredictionResponse(BaseModel):
    crop_type: str
    base_yield: float
    estimated_yield: float
    yield_category: str
    total_yield: float
    factors: dict[str, float]
    suggestions: list[str]
    land_area: float
    land_area_unit: AreaUnit


# ── Costs ────────────────────────────────────────────────────────────────────

class CostEstimateRequest(BaseModel):
    crop_type: str = Field(min_length=1)
    land_area: float = Field(gt=0)
    land_area_unit: AreaUnit = AreaUnit.HECTARES
    estimated_yield: float | None = Field(default=None, ge=0)


class CostInputs(BaseModel):
    seeds: float = Field(default=0, ge=0)
    fertilizers: float = Field(default=0, ge=0)
    pesticides: float = Field(default=0, ge=0)
    irrigation: float = Field(default=0, ge=0)
    labor: float = Field(default=0, ge=0)
    machinery: float = Field(default=0, ge=0)
    others: float = Field(default=0, ge=0)


class CostEstimateResponse(BaseModel):
    crop_type: str
    area_hectares: float
    inputs: dict[str, int]
    total_cost: int
    market_price: float
    expected_yield: float
    gross_income: float
    net_profit: float
    profit_margin: float
    return_on_investment: float
    break_even_yield: float


class ProfitabilityRequest(BaseModel):
    inputs: CostInputs
    market_price: float = Field(ge=0)
    expected_yield: float = Field(ge=0)


class ProfitabilityResponse(BaseModel):
    total_cost: float
    gross_income: float
    net_profit: float
    profit_margin: float
    return_on_investment: float
    break_even_yield: float
    profitability: str
    margin_band: str
    roi_band: str
    break_even_status: str
    advice: list[str]


# ── Water ────────────────────────────────────────────────────────────────────

class WaterPlanRequest(BaseModel):
    crop_type: str = Field(min_length=1)
    soil_type: str = Field(min_length=1)
    rainfall: float = Field(default=50, ge=0, le=200)


class IrrigationWeek(BaseModel):
    week: int
    water_needed: int
    frequency: int
    duration: int


class Indicator(BaseModel):
    percent: int
    label: str


class WaterPlanResponse(BaseModel):
    crop_type: str
    soil_type: str
    rainfall: float
    water_requirement: float
    season_length: int
    total_season_requirement: int
    current_water_balance: int
    water_stress_risk: str
    stress_warning: str | None
    irrigation_schedule: list[IrrigationWeek]
    conservation_tips: list[str]
    soil_retention: Indicator
    crop_water_demand: Indicator


class IrrigationRequest(BaseModel):
    crop_type: str = Field(min_length=1)
    soil_type: str = Field(min_length=1)
    land_area: float = Field(gt=0)
    land_area_unit: AreaUnit = AreaUnit.HECTARES
    flow_rate: float = Field(default=10, ge=1, le=50)  # litres/minute
    irrigation_system: str = Field(default="drip", pattern="^(drip|sprinkler|flood)$")


class IrrigationResponse(BaseModel):
    water_requirement: float
    water_needed: float
    irrigation_time: float
    water_saved: float
    irrigation_system: str
    efficiency_note: str


# ── Soil ─────────────────────────────────────────────────────────────────────

class SoilHealthResponse(BaseModel):
    soil_type: str
    ph: float
    organic_matter: float
    nitrogen: float
    phosphorus: float
    potassium: float
    micronutrients: dict[str, float]
    texture: dict[str, int]
    health_score: int
    health_band: str
    ph_class: str
    texture_class: str
    texture_properties: dict[str, Indicator]
    texture_tip: str
    nutrient_status: dict[str, str]
    micronutrient_status: dict[str, str]
    recommendations: list[str]
    management: dict[str, str]


# ── Advisory ─────────────────────────────────────────────────────────────────

class RotationResponse(BaseModel):
    current_crop: str
    soil_type: str
    recommended_sequence: list[str]
    benefits: list[str]
    timeframe: str
    summary: str


class Threat(BaseModel):
    name: str
    risk_level: str
    symptoms: str
    management: str


class PestDiseaseResponse(BaseModel):
    crop_type: str
    pests: list[Threat]
    diseases: list[Threat]
    current_alerts: list[str]
    highest_risk: str


class MarketQuote(BaseModel):
    name: str
    price: int
    change: float
    trend: str


class MarketPricesResponse(BaseModel):
    crop_type: str
    markets: list[MarketQuote]


class AdvisoryReport(BaseModel):
    parameters: ParameterSet
    yield_prediction: YieldPredictionResponse
    costs: CostEstimateResponse
    profitability: ProfitabilityResponse
    water: WaterPlanResponse | None = None
    soil: SoilHealthResponse | None = None
    rotation: RotationResponse | None = None
    pests: PestDiseaseResponse


# ── Calendar ─────────────────────────────────────────────────────────────────

class CropStage(BaseModel):
    name: str
    duration: str
    activities: list[str]
    start_day: int
    end_day: int


class CropTimeline(BaseModel):
    crop: str
    total_duration: int
    stages: list[CropStage]


class CalendarEvent(BaseModel):
    id: str
    title: str
    date: date
    type: str
    description: str
    priority: str


class FarmingCalendarResponse(BaseModel):
    crop_type: str
    season_start: date
    timeline: CropTimeline
    events: list[CalendarEvent]


# ── Weather ──────────────────────────────────────────────────────────────────

class ForecastDay(BaseModel):
    day: str
    temperature: float
    condition: str


class WeatherForecastResponse(BaseModel):
    latitude: float
    longitude: float
    temperature: float
    humidity: float
    wind_speed: float
    condition: str
    feels_like: float
    source: str
    forecast: list[ForecastDay]


class WeatherAlertResponse(BaseModel):
    id: str
    type: str
    severity: str
    title: str
    description: str
    date: datetime


# ── Location ─────────────────────────────────────────────────────────────────

class LocationResponse(BaseModel):
    lat: float
    lng: float
    address: str
    source: str


class LocationResult(BaseModel):
    place_id: str
    lat: float
    lon: float
    display_name: str


# ── Offline data & preferences ───────────────────────────────────────────────

class OfflineDataResponse(BaseModel):
    crops: list[str]
    last_synced: datetime | None
    storage_used: float
    storage_limit: float
    storage_used_display: str
    storage_limit_display: str
    storage_percent: float
    storage_status: str


class OfflineDownloadRequest(BaseModel):
    crop_type: str = Field(min_length=1)


class OfflineDownloadResponse(BaseModel):
    downloaded: bool
    message: str
    offline_data: OfflineDataResponse


class LanguagePreference(BaseModel):
    code: str
    name: str | None = None


class LanguageUpdate(BaseModel):
    code: str = Field(min_length=2, max_length=5)

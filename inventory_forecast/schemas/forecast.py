from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel

from inventory_forecast.core.config import (
    DEFAULT_DAYS_PER_YEAR,
    DEFAULT_HOLDING_COST,
    DEFAULT_ORDER_COST,
    DEFAULT_Z_SCORE,
)


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightStatus(str, Enum):
    STABLE = "stable"
    CAUTION = "caution"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


class SafetyStockResult(BaseModel):
    demand_std_dev: float = 0.0
    safety_stock: float = 0.0


class ReorderPointResult(BaseModel):
    avg_daily_demand: float = 0.0
    safety_stock: float = 0.0
    reorder_point: float = 0.0


class EoqResult(BaseModel):
    annual_demand: float = 0.0
    eoq: float = 0.0


class InsightBundle(BaseModel):
    status: InsightStatus
    summary: str
    demand_signal: str
    variability_signal: str
    buffer_signal: str
    reorder_signal: str
    cost_signal: str
    recommendation: str


class ForecastResult(BaseModel):
    """Aggregate forecast for one demand history.

    Fields are only ever added to this model; existing ones keep their name
    and meaning so callers reading a subset of fields keep working.
    """

    avg_daily_demand: float
    days_remaining: Literal["Infinite"] | float
    risk_level: RiskLevel
    recommendation: str

    demand_std_dev: float
    safety_stock: float
    reorder_point: float

    annual_demand: float
    eoq: float

    insights: InsightBundle | None = None


class ForecastSettingsResponse(BaseModel):
    medium_risk_multiplier: float
    high_variability_threshold: float
    moderate_variability_threshold: float


# Request bodies keep demand/stock/cost fields loosely typed: messy payloads
# are handed to the calculators, which degrade them to safe defaults.


class SafetyStockRequest(BaseModel):
    demand_history: Any = None
    lead_time: Any = None
    z_score: Any = DEFAULT_Z_SCORE
    avg_demand: Any = None


class ReorderPointRequest(BaseModel):
    demand_history: Any = None
    lead_time: Any = None
    z_score: Any = DEFAULT_Z_SCORE


class EoqRequest(BaseModel):
    demand_history: Any = None
    order_cost: Any = DEFAULT_ORDER_COST
    holding_cost: Any = DEFAULT_HOLDING_COST
    days_per_year: Any = DEFAULT_DAYS_PER_YEAR


class ForecastRequest(BaseModel):
    demand_history: Any = None
    current_stock: Any = None
    lead_time: Any = None
    z_score: Any = DEFAULT_Z_SCORE
    order_cost: Any = DEFAULT_ORDER_COST
    holding_cost: Any = DEFAULT_HOLDING_COST
    include_insights: bool = True

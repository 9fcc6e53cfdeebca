from __future__ import annotations

import logging
import math
from typing import Any

from inventory_forecast.core.config import (
    DEFAULT_HOLDING_COST,
    DEFAULT_ORDER_COST,
    DEFAULT_Z_SCORE,
    INFINITE_DAYS,
    ForecastSettings,
    get_settings,
)
from inventory_forecast.schemas.forecast import ForecastResult, RiskLevel
from inventory_forecast.services.coverage import compute_days_remaining
from inventory_forecast.services.demand import compute_average_demand
from inventory_forecast.services.eoq import calculate_eoq
from inventory_forecast.services.insights import generate_insights
from inventory_forecast.services.reorder_point import calculate_reorder_point
from inventory_forecast.services.safety_stock import calculate_safety_stock
from inventory_forecast.services.stockout_risk import classify_stockout_risk


logger = logging.getLogger(__name__)


REORDER_NOW_RECOMMENDATION = "Reorder immediately"
MONITOR_RECOMMENDATION = "Monitor stock levels"


def build_forecast(
    history: Any,
    current_stock: Any,
    lead_time: Any,
    z_score: Any = DEFAULT_Z_SCORE,
    order_cost: Any = DEFAULT_ORDER_COST,
    holding_cost: Any = DEFAULT_HOLDING_COST,
    include_insights: bool = True,
    settings: ForecastSettings | None = None,
) -> ForecastResult:
    """Compute the full inventory forecast for one demand history.

    Runs average demand, days remaining, stockout risk, safety stock,
    reorder point and EOQ in that order, then (optionally) the insight
    signals on the assembled result. Every field equals what its dedicated
    calculator returns for the same inputs. Unbounded days remaining is
    reported as the "Infinite" sentinel instead of a float infinity.
    """

    if settings is None:
        settings = get_settings()

    avg_daily_demand = compute_average_demand(history)
    days_remaining = compute_days_remaining(current_stock, avg_daily_demand)
    risk_level = classify_stockout_risk(days_remaining, lead_time, settings=settings)

    safety = calculate_safety_stock(history, lead_time, z_score, avg_daily_demand)
    reorder = calculate_reorder_point(history, lead_time, z_score)
    order_quantity = calculate_eoq(history, order_cost, holding_cost)

    if risk_level == RiskLevel.HIGH:
        recommendation = REORDER_NOW_RECOMMENDATION
    else:
        recommendation = MONITOR_RECOMMENDATION

    fields = {
        "avg_daily_demand": round(avg_daily_demand, 2),
        "days_remaining": INFINITE_DAYS if days_remaining == math.inf else round(days_remaining, 2),
        "risk_level": risk_level,
        "recommendation": recommendation,
        "demand_std_dev": safety.demand_std_dev,
        "safety_stock": safety.safety_stock,
        "reorder_point": reorder.reorder_point,
        "annual_demand": order_quantity.annual_demand,
        "eoq": order_quantity.eoq,
    }

    logger.debug(
        "Forecast computed: avg_daily_demand=%.3f, days_remaining=%s, risk_level=%s, "
        "safety_stock=%s, reorder_point=%s, eoq=%s",
        avg_daily_demand,
        fields["days_remaining"],
        risk_level.value,
        fields["safety_stock"],
        fields["reorder_point"],
        fields["eoq"],
    )

    insights = generate_insights(fields, settings=settings) if include_insights else None

    return ForecastResult(**fields, insights=insights)

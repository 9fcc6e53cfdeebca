from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from inventory_forecast.core.config import ForecastSettings, get_settings
from inventory_forecast.core.validation import is_number
from inventory_forecast.schemas.forecast import InsightBundle, InsightStatus, RiskLevel


logger = logging.getLogger(__name__)


def _insufficient_data_insights() -> InsightBundle:
    return InsightBundle(
        status=InsightStatus.UNKNOWN,
        summary="Insufficient data for insights.",
        demand_signal="Demand data unavailable.",
        variability_signal="Variability unknown.",
        buffer_signal="No buffer info.",
        reorder_signal="Reorder status unknown.",
        cost_signal="Cost optimization unknown.",
        recommendation="Gather more data.",
    )


def _field(data: Any, name: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)


def _number_or_zero(value: Any) -> float:
    return value if is_number(value) else 0


def _format_quantity(value: Any) -> str:
    """Render a quantity the way it reads in a sentence: 50, 11.43, 239.05."""

    if not is_number(value):
        return str(value)
    return f"{value:.2f}".rstrip("0").rstrip(".")


def generate_insights(
    forecast_data: Any,
    settings: ForecastSettings | None = None,
) -> InsightBundle:
    """Turn a forecast into human-readable signals.

    Accepts a ForecastResult, a mapping with the same keys, or any object
    exposing them as attributes. Nothing is recomputed; the signals only
    restate the forecast numbers. A forecast without a usable (non-zero)
    average demand gets the fixed "insufficient data" bundle.
    """

    if settings is None:
        settings = get_settings()

    avg_daily_demand = _field(forecast_data, "avg_daily_demand")
    if not is_number(avg_daily_demand) or avg_daily_demand == 0:
        logger.debug("Forecast has no usable avg_daily_demand (%r); insufficient data", avg_daily_demand)
        return _insufficient_data_insights()

    demand_std_dev = _number_or_zero(_field(forecast_data, "demand_std_dev"))
    safety_stock = _number_or_zero(_field(forecast_data, "safety_stock"))
    reorder_point = _field(forecast_data, "reorder_point")
    eoq = _field(forecast_data, "eoq")
    risk_level = _field(forecast_data, "risk_level")

    demand_signal = f"Demand stable around {_format_quantity(avg_daily_demand)} units per day."

    if demand_std_dev > settings.high_variability_threshold:
        variability_signal = "High variability - monitor closely for stockouts."
    elif demand_std_dev > settings.moderate_variability_threshold:
        variability_signal = "Moderate variability (plan buffer)."
    else:
        variability_signal = "Low variability (stable demand)."

    buffer_days = f"{safety_stock / avg_daily_demand:.1f}" if avg_daily_demand > 0 else "0"
    buffer_signal = f"Safety stock protects {buffer_days} days of demand."

    reorder_signal = f"Reorder triggered at {_format_quantity(reorder_point)} units."
    cost_signal = f"EOQ of {_format_quantity(eoq)} units optimizes ordering/holding costs."

    if risk_level == RiskLevel.HIGH:
        status = InsightStatus.CRITICAL
        summary = "High stockout risk - act now to avoid shortages."
        recommendation = "Reorder immediately and review suppliers."
    elif risk_level == RiskLevel.MEDIUM:
        status = InsightStatus.CAUTION
        summary = "Moderate risk - proactive monitoring advised."
        recommendation = "Plan reorder soon."
    else:
        status = InsightStatus.STABLE
        summary = "Inventory levels are healthy."
        recommendation = "Monitor stock levels."

    return InsightBundle(
        status=status,
        summary=summary,
        demand_signal=demand_signal,
        variability_signal=variability_signal,
        buffer_signal=buffer_signal,
        reorder_signal=reorder_signal,
        cost_signal=cost_signal,
        recommendation=recommendation,
    )

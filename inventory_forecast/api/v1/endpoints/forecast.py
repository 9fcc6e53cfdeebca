from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from inventory_forecast.core.config import ForecastSettings, get_settings
from inventory_forecast.schemas.forecast import (
    EoqRequest,
    EoqResult,
    ForecastRequest,
    ForecastResult,
    ForecastSettingsResponse,
    InsightBundle,
    ReorderPointRequest,
    ReorderPointResult,
    SafetyStockRequest,
    SafetyStockResult,
)
from inventory_forecast.services.eoq import calculate_eoq
from inventory_forecast.services.forecast import build_forecast
from inventory_forecast.services.insights import generate_insights
from inventory_forecast.services.reorder_point import calculate_reorder_point
from inventory_forecast.services.safety_stock import calculate_safety_stock


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/settings", response_model=ForecastSettingsResponse)
def get_forecast_settings(settings: ForecastSettings = Depends(get_settings)):
    return ForecastSettingsResponse(
        medium_risk_multiplier=settings.medium_risk_multiplier,
        high_variability_threshold=settings.high_variability_threshold,
        moderate_variability_threshold=settings.moderate_variability_threshold,
    )


@router.post("", response_model=ForecastResult)
def create_forecast(
    request: ForecastRequest,
    settings: ForecastSettings = Depends(get_settings),
):
    """Full forecast bundle for one demand history.

    Malformed demand/stock/lead time values are not rejected; they degrade
    to the calculators' safe defaults (zero forecast, low risk).
    """

    result = build_forecast(
        history=request.demand_history,
        current_stock=request.current_stock,
        lead_time=request.lead_time,
        z_score=request.z_score,
        order_cost=request.order_cost,
        holding_cost=request.holding_cost,
        include_insights=request.include_insights,
        settings=settings,
    )
    logger.info(
        "Forecast request handled: risk_level=%s, reorder_point=%s",
        result.risk_level.value,
        result.reorder_point,
    )
    return result


@router.post("/safety-stock", response_model=SafetyStockResult)
def create_safety_stock(request: SafetyStockRequest):
    return calculate_safety_stock(
        request.demand_history,
        request.lead_time,
        request.z_score,
        request.avg_demand,
    )


@router.post("/reorder-point", response_model=ReorderPointResult)
def create_reorder_point(request: ReorderPointRequest):
    return calculate_reorder_point(
        request.demand_history,
        request.lead_time,
        request.z_score,
    )


@router.post("/eoq", response_model=EoqResult)
def create_eoq(request: EoqRequest):
    return calculate_eoq(
        request.demand_history,
        request.order_cost,
        request.holding_cost,
        request.days_per_year,
    )


@router.post("/insights", response_model=InsightBundle)
def create_insights(
    forecast_data: Any = Body(default=None),
    settings: ForecastSettings = Depends(get_settings),
):
    """Insight signals for a forecast-shaped JSON object (e.g. a stored ForecastResult)."""

    return generate_insights(forecast_data, settings=settings)

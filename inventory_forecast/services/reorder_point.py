from __future__ import annotations

import logging
from typing import Any

from inventory_forecast.core.config import DEFAULT_Z_SCORE
from inventory_forecast.core.validation import is_demand_history, is_number
from inventory_forecast.schemas.forecast import ReorderPointResult
from inventory_forecast.services.demand import compute_average_demand
from inventory_forecast.services.safety_stock import calculate_safety_stock


logger = logging.getLogger(__name__)


def calculate_reorder_point(
    history: Any,
    lead_time: Any,
    z_score: Any = DEFAULT_Z_SCORE,
) -> ReorderPointResult:
    """Stock level at which a replenishment order should be placed.

    reorder_point = avg_daily_demand * lead_time + safety_stock, i.e. the
    expected consumption while the order is in transit plus the variability
    buffer. The average demand is passed on to the safety stock calculation
    so the mean is computed once.
    """

    if (
        not is_demand_history(history)
        or len(history) == 0
        or not is_number(lead_time)
        or lead_time < 0
        or not is_number(z_score)
        or z_score < 0
    ):
        logger.debug(
            "Invalid reorder point input (lead_time=%r, z_score=%r); returning zero reorder point",
            lead_time,
            z_score,
        )
        return ReorderPointResult(avg_daily_demand=0.0, safety_stock=0.0, reorder_point=0.0)

    avg_daily_demand = compute_average_demand(history)
    safety = calculate_safety_stock(history, lead_time, z_score, avg_daily_demand)

    reorder_point = avg_daily_demand * lead_time + safety.safety_stock

    return ReorderPointResult(
        avg_daily_demand=round(avg_daily_demand, 2),
        safety_stock=safety.safety_stock,
        reorder_point=round(reorder_point, 2),
    )

from __future__ import annotations

import logging
import math
from typing import Any

from inventory_forecast.core.config import (
    DEFAULT_DAYS_PER_YEAR,
    DEFAULT_HOLDING_COST,
    DEFAULT_ORDER_COST,
)
from inventory_forecast.core.validation import is_demand_history, is_number
from inventory_forecast.schemas.forecast import EoqResult
from inventory_forecast.services.demand import compute_average_demand


logger = logging.getLogger(__name__)


def _is_positive(value: Any) -> bool:
    return is_number(value) and value > 0


def calculate_eoq(
    history: Any,
    order_cost: Any = DEFAULT_ORDER_COST,
    holding_cost: Any = DEFAULT_HOLDING_COST,
    days_per_year: Any = DEFAULT_DAYS_PER_YEAR,
) -> EoqResult:
    """Economic order quantity: sqrt(2 * annual_demand * order_cost / holding_cost).

    Annual demand is the average daily demand scaled by `days_per_year`
    (business days by default). No demand, an invalid history or a
    non-positive cost/day parameter gives zeros. Outputs are rounded to
    2 decimals.
    """

    if (
        not is_demand_history(history)
        or len(history) == 0
        or not _is_positive(order_cost)
        or not _is_positive(holding_cost)
        or not _is_positive(days_per_year)
    ):
        logger.debug(
            "Invalid EOQ input (order_cost=%r, holding_cost=%r, days_per_year=%r); returning zero EOQ",
            order_cost,
            holding_cost,
            days_per_year,
        )
        return EoqResult(annual_demand=0.0, eoq=0.0)

    avg_daily_demand = compute_average_demand(history)
    if avg_daily_demand == 0:
        return EoqResult(annual_demand=0.0, eoq=0.0)

    annual_demand = avg_daily_demand * days_per_year
    eoq = math.sqrt(2 * annual_demand * order_cost / holding_cost)

    return EoqResult(
        annual_demand=round(annual_demand, 2),
        eoq=round(eoq, 2),
    )

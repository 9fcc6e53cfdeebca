from __future__ import annotations

import logging
import math
from typing import Any

from inventory_forecast.core.config import DEFAULT_Z_SCORE
from inventory_forecast.core.validation import is_demand_history, is_number, valid_demands
from inventory_forecast.schemas.forecast import SafetyStockResult


logger = logging.getLogger(__name__)


def calculate_safety_stock(
    history: Any,
    lead_time: Any,
    z_score: Any = DEFAULT_Z_SCORE,
    avg_demand: Any = None,
) -> SafetyStockResult:
    """Demand variability and the safety stock buffer it calls for.

    demand_std_dev is the sample standard deviation (n - 1 divisor, 0 for a
    single sample) of the valid demand entries. Demand variance grows linearly
    with time, so its standard deviation grows with sqrt(time):

        safety_stock = z_score * demand_std_dev * sqrt(lead_time)

    `avg_demand` may carry the already computed average demand of the same
    history; when it is a valid non-negative number it is used as the mean
    instead of recomputing it. Both outputs are rounded to 2 decimals.
    Invalid history, negative lead time or negative z_score give zeros.
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
            "Invalid safety stock input (lead_time=%r, z_score=%r); returning zero safety stock",
            lead_time,
            z_score,
        )
        return SafetyStockResult(demand_std_dev=0.0, safety_stock=0.0)

    demands = valid_demands(history)
    n = len(demands)
    if n == 0:
        return SafetyStockResult(demand_std_dev=0.0, safety_stock=0.0)

    if is_number(avg_demand) and avg_demand >= 0:
        mean = avg_demand
    else:
        mean = sum(demands) / n

    variance = 0.0
    if n > 1:
        variance = sum((d - mean) ** 2 for d in demands) / (n - 1)

    demand_std_dev = math.sqrt(variance)
    safety_stock = z_score * demand_std_dev * math.sqrt(lead_time)

    return SafetyStockResult(
        demand_std_dev=round(demand_std_dev, 2),
        safety_stock=round(safety_stock, 2),
    )

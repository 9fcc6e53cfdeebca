from __future__ import annotations

import logging
import math
from typing import Any

from inventory_forecast.core.validation import is_number


logger = logging.getLogger(__name__)


def compute_days_remaining(current_stock: Any, avg_daily_demand: Any) -> float:
    """Days until stock runs out at the average daily demand rate.

    Returns 0 for non-numeric input or when nothing is in stock, and
    math.inf when there is stock but no demand (it never depletes).
    """

    if not is_number(current_stock) or not is_number(avg_daily_demand):
        logger.debug(
            "Non-numeric input (current_stock=%r, avg_daily_demand=%r); days remaining set to 0",
            current_stock,
            avg_daily_demand,
        )
        return 0.0

    if current_stock <= 0:
        return 0.0

    if avg_daily_demand <= 0:
        return math.inf

    return current_stock / avg_daily_demand

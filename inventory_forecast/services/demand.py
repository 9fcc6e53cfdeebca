from __future__ import annotations

import logging
from typing import Any

from inventory_forecast.core.validation import valid_demands


logger = logging.getLogger(__name__)


def compute_average_demand(history: Any) -> float:
    """Arithmetic mean of the valid (numeric, non-negative) daily demand values.

    Invalid entries are dropped before averaging. Anything that is not a
    list-like history, or has no valid entry left, yields 0. The result keeps
    full precision; rounding is left to the caller.
    """

    demands = valid_demands(history)
    if not demands:
        logger.debug("No valid demand entries in history; average demand set to 0")
        return 0.0

    return sum(demands) / len(demands)

from __future__ import annotations

import logging
import math
from typing import Any

from inventory_forecast.core.config import ForecastSettings, get_settings
from inventory_forecast.core.validation import is_number
from inventory_forecast.schemas.forecast import RiskLevel


logger = logging.getLogger(__name__)


def classify_stockout_risk(
    days_remaining: Any,
    lead_time: Any,
    settings: ForecastSettings | None = None,
) -> RiskLevel:
    """Classify stockout risk from days of stock left and supplier lead time.

    HIGH when stock runs out before a new order can arrive, MEDIUM when it runs
    out within lead_time * medium_risk_multiplier, LOW otherwise. Invalid or
    negative inputs and unbounded days remaining are LOW.
    """

    if settings is None:
        settings = get_settings()

    if (
        not is_number(days_remaining)
        or not is_number(lead_time)
        or lead_time < 0
        or days_remaining < 0
    ):
        logger.debug(
            "Invalid risk input (days_remaining=%r, lead_time=%r); risk set to low",
            days_remaining,
            lead_time,
        )
        return RiskLevel.LOW

    if days_remaining == math.inf:
        return RiskLevel.LOW

    if days_remaining < lead_time:
        return RiskLevel.HIGH
    if days_remaining < lead_time * settings.medium_risk_multiplier:
        return RiskLevel.MEDIUM

    return RiskLevel.LOW

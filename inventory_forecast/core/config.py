from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


logger = logging.getLogger(__name__)


DEFAULT_Z_SCORE = 1.65
DEFAULT_ORDER_COST = 100
DEFAULT_HOLDING_COST = 10
DEFAULT_DAYS_PER_YEAR = 250

MEDIUM_RISK_MULTIPLIER = 1.5
HIGH_VARIABILITY_THRESHOLD = 3
MODERATE_VARIABILITY_THRESHOLD = 1

INFINITE_DAYS = "Infinite"


@dataclass(frozen=True)
class ForecastSettings:
    """Policy thresholds used by the risk classifier and the insight generator.

    Defaults are fixed policy values; they can be tuned per deployment through
    environment variables (see `load_settings`).
    """

    medium_risk_multiplier: float = MEDIUM_RISK_MULTIPLIER
    """Days remaining below lead_time * multiplier (and not below lead_time) is MEDIUM risk."""

    high_variability_threshold: float = HIGH_VARIABILITY_THRESHOLD
    """Demand std dev strictly above this value is reported as high variability."""

    moderate_variability_threshold: float = MODERATE_VARIABILITY_THRESHOLD
    """Demand std dev strictly above this value is reported as moderate variability."""


def _read_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number), using default %s", name, raw, default)
        return default

    if value != value or value < 0:
        logger.warning("Ignoring %s=%r (must be a non-negative number), using default %s", name, raw, default)
        return default

    return value


def load_settings() -> ForecastSettings:
    """Build ForecastSettings from FORECAST_* environment variables."""

    return ForecastSettings(
        medium_risk_multiplier=_read_float_env(
            "FORECAST_MEDIUM_RISK_MULTIPLIER", MEDIUM_RISK_MULTIPLIER
        ),
        high_variability_threshold=_read_float_env(
            "FORECAST_HIGH_VARIABILITY_THRESHOLD", HIGH_VARIABILITY_THRESHOLD
        ),
        moderate_variability_threshold=_read_float_env(
            "FORECAST_MODERATE_VARIABILITY_THRESHOLD", MODERATE_VARIABILITY_THRESHOLD
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> ForecastSettings:
    return load_settings()


def get_log_level() -> str:
    level = os.getenv("FORECAST_LOG_LEVEL", "INFO").upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        logger.warning("Unknown FORECAST_LOG_LEVEL=%r, using INFO", level)
        return "INFO"
    return level

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from inventory_forecast.core.config import ForecastSettings, get_settings
from inventory_forecast.main import app


@pytest.fixture
def settings() -> ForecastSettings:
    """Default policy thresholds, independent of FORECAST_* env vars."""
    return ForecastSettings()


@pytest.fixture
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset the cached settings before and after a test that changes env vars."""
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()


@pytest.fixture
def client(settings) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

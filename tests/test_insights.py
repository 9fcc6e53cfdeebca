from __future__ import annotations

from types import SimpleNamespace

import pytest

from inventory_forecast.core.config import ForecastSettings
from inventory_forecast.schemas.forecast import InsightBundle, InsightStatus, RiskLevel
from inventory_forecast.services.insights import generate_insights


def _forecast_data(**overrides):
    data = {
        "avg_daily_demand": 11.43,
        "days_remaining": 4.38,
        "risk_level": RiskLevel.HIGH,
        "recommendation": "Reorder immediately",
        "demand_std_dev": 2.07,
        "safety_stock": 7.64,
        "reorder_point": 64.78,
        "annual_demand": 2857.14,
        "eoq": 239.05,
    }
    data.update(overrides)
    return data


class TestGenerateInsights:
    def test_high_risk_forecast(self, settings):
        insights = generate_insights(_forecast_data(), settings=settings)

        assert insights == InsightBundle(
            status=InsightStatus.CRITICAL,
            summary="High stockout risk - act now to avoid shortages.",
            demand_signal="Demand stable around 11.43 units per day.",
            variability_signal="Moderate variability (plan buffer).",
            buffer_signal="Safety stock protects 0.7 days of demand.",
            reorder_signal="Reorder triggered at 64.78 units.",
            cost_signal="EOQ of 239.05 units optimizes ordering/holding costs.",
            recommendation="Reorder immediately and review suppliers.",
        )

    def test_medium_risk_is_caution(self, settings):
        insights = generate_insights(_forecast_data(risk_level=RiskLevel.MEDIUM), settings=settings)

        assert insights.status == InsightStatus.CAUTION
        assert insights.summary == "Moderate risk - proactive monitoring advised."
        assert insights.recommendation == "Plan reorder soon."

    def test_low_risk_is_stable(self, settings):
        insights = generate_insights(_forecast_data(risk_level=RiskLevel.LOW), settings=settings)

        assert insights.status == InsightStatus.STABLE
        assert insights.summary == "Inventory levels are healthy."
        assert insights.recommendation == "Monitor stock levels."

    def test_plain_string_risk_level(self, settings):
        assert generate_insights(_forecast_data(risk_level="high"), settings=settings).status == "critical"
        assert generate_insights(_forecast_data(risk_level="medium"), settings=settings).status == "caution"
        assert generate_insights(_forecast_data(risk_level="bogus"), settings=settings).status == "stable"

    @pytest.mark.parametrize(
        "std_dev, expected",
        [
            (9.09, "High variability - monitor closely for stockouts."),
            (3.01, "High variability - monitor closely for stockouts."),
            (3, "Moderate variability (plan buffer)."),
            (1.01, "Moderate variability (plan buffer)."),
            (1, "Low variability (stable demand)."),
            (0, "Low variability (stable demand)."),
        ],
    )
    def test_variability_tiers(self, settings, std_dev, expected):
        insights = generate_insights(_forecast_data(demand_std_dev=std_dev), settings=settings)

        assert insights.variability_signal == expected

    def test_variability_thresholds_are_configurable(self):
        relaxed = ForecastSettings(high_variability_threshold=10, moderate_variability_threshold=5)
        insights = generate_insights(_forecast_data(demand_std_dev=9.09), settings=relaxed)

        assert insights.variability_signal == "Moderate variability (plan buffer)."

    def test_whole_numbers_render_without_decimals(self, settings):
        insights = generate_insights(
            _forecast_data(avg_daily_demand=10.0, safety_stock=0.0, reorder_point=50.0, eoq=223.61),
            settings=settings,
        )

        assert insights.demand_signal == "Demand stable around 10 units per day."
        assert insights.buffer_signal == "Safety stock protects 0.0 days of demand."
        assert insights.reorder_signal == "Reorder triggered at 50 units."
        assert insights.cost_signal == "EOQ of 223.61 units optimizes ordering/holding costs."

    def test_accepts_objects_exposing_forecast_fields(self, settings):
        as_object = SimpleNamespace(**_forecast_data())

        assert generate_insights(as_object, settings=settings) == generate_insights(
            _forecast_data(), settings=settings
        )

    def test_missing_optional_fields_do_not_fail(self, settings):
        insights = generate_insights({"avg_daily_demand": 4}, settings=settings)

        assert insights.status == InsightStatus.STABLE
        assert insights.variability_signal == "Low variability (stable demand)."
        assert insights.buffer_signal == "Safety stock protects 0.0 days of demand."

    @pytest.mark.parametrize(
        "forecast_data",
        [
            None,
            "forecast",
            42,
            [],
            {},
            {"avg_daily_demand": 0},
            {"avg_daily_demand": None},
            {"avg_daily_demand": "11.43"},
            SimpleNamespace(eoq=10),
        ],
    )
    def test_insufficient_data(self, settings, forecast_data):
        insights = generate_insights(forecast_data, settings=settings)

        assert insights.status == InsightStatus.UNKNOWN
        assert insights.summary == "Insufficient data for insights."
        assert insights.demand_signal == "Demand data unavailable."
        assert insights.variability_signal == "Variability unknown."
        assert insights.buffer_signal == "No buffer info."
        assert insights.reorder_signal == "Reorder status unknown."
        assert insights.cost_signal == "Cost optimization unknown."
        assert insights.recommendation == "Gather more data."

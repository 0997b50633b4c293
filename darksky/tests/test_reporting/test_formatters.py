"""Tests for forecast output formatters."""

import json
from decimal import Decimal

from darksky.models.forecast import ForecastResult
from darksky.reporting.formatters import (
    format_forecast_json,
    format_forecast_summary,
    format_forecast_text,
)


class TestFormatters:
    def test_summary(self, sf_result: ForecastResult):
        assert format_forecast_summary(sf_result) == "61.2°F 🌫 Foggy"

    def test_text_full(self, sf_result: ForecastResult):
        text = format_forecast_text(sf_result, "San Francisco")
        lines = text.splitlines()
        assert lines[0] == "=== Forecast for San Francisco (America/Los_Angeles) ==="
        assert lines[1] == "Now: 61.2°F 🌫 Foggy"
        assert "Next hour: Foggy for the hour." in lines
        assert "Next 48h: Foggy until this evening." in lines
        assert "Today: high 63.7°F, low 50.1°F, precip 56%" in lines
        assert "ALERT: Dense Fog Advisory (until 2019-11-22 08:00 UTC)" in lines
        assert lines[-1].startswith("Sources: nwspa, cmc")

    def test_text_defaults_to_coordinates(self, sf_result: ForecastResult):
        text = format_forecast_text(sf_result)
        assert "Forecast for 37.8267,-122.4233" in text

    def test_text_without_optionals(self, london_body: str):
        result = ForecastResult.from_json(london_body)
        text = format_forecast_text(result, "London")
        assert "Now: 7.4°C 🌙 Mostly Cloudy" in text
        assert "Next hour" not in text
        assert "Today:" not in text
        assert "ALERT" not in text

    def test_json(self, sf_result: ForecastResult):
        data = json.loads(format_forecast_json(sf_result), parse_float=Decimal)
        assert data["latitude"] == Decimal("37.8267")
        assert data["flags"]["nearest-station"] == Decimal("1.835")
        assert data["currently"]["apparentTemperature"] == Decimal("61.2")

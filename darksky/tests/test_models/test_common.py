"""Tests for unit and icon lookups."""

import pytest

from darksky.models.common import (
    WEATHER_ICONS,
    TemperatureUnit,
    temperature_unit,
    weather_icon,
)


class TestTemperatureUnit:
    def test_us_is_fahrenheit(self):
        assert temperature_unit("us") == TemperatureUnit.FAHRENHEIT
        assert str(temperature_unit("us")) == "F"

    @pytest.mark.parametrize("units", ["si", "ca", "uk2", "", "auto"])
    def test_everything_else_is_celsius(self, units: str):
        assert temperature_unit(units) == TemperatureUnit.CELSIUS


class TestWeatherIcon:
    @pytest.mark.parametrize(
        "icon,glyph",
        [
            ("clear-day", "☀️"),
            ("clear-night", "🌙"),
            ("rain", "🌧"),
            ("snow", "🌨"),
            ("sleet", "🌨"),
            ("wind", "💨"),
            ("fog", "🌫"),
            ("cloudy", "☁️"),
            ("partly-cloudy-day", "⛅️"),
            ("partly-cloudy-night", "🌙"),
            ("hail", "🌧"),
            ("thunderstorm", "⛈"),
            ("tornado", "🌪"),
        ],
    )
    def test_known_icons(self, icon: str, glyph: str):
        assert weather_icon(icon) == glyph

    def test_table_is_complete(self):
        assert len(WEATHER_ICONS) == 13

    @pytest.mark.parametrize("icon", ["bogus-icon", "", "Clear-Day", " fog"])
    def test_unknown_is_empty(self, icon: str):
        assert weather_icon(icon) == ""

"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Any, TypeAlias

from pydantic import BeforeValidator, Field


def _require_number(value: Any) -> Any:
    # bool is an int subclass; neither it nor numeric strings are accepted
    if isinstance(value, (bool, str, bytes)):
        raise ValueError(f"expected a JSON number, got {type(value).__name__}")
    return value


Number = BeforeValidator(_require_number)


def _require_coordinate(value: Any) -> Any:
    # coordinates too precise for a float are written back as decimal strings
    if isinstance(value, str):
        try:
            parsed = Decimal(value)
        except ArithmeticError:
            raise ValueError(f"invalid decimal coordinate: {value!r}") from None
        if not parsed.is_finite():
            raise ValueError(f"coordinate must be finite: {value!r}")
        return parsed
    return _require_number(value)


UnixTime: TypeAlias = Annotated[int, Number, Field(ge=0)]
Bearing: TypeAlias = Annotated[int, Number, Field(ge=0, le=65535)]
UvIndex: TypeAlias = Annotated[int, Number, Field(ge=0, le=255)]
Offset: TypeAlias = Annotated[int, Number, Field(ge=-128, le=127)]
Coordinate: TypeAlias = Annotated[Decimal, BeforeValidator(_require_coordinate)]

Temperature: TypeAlias = Annotated[float, Number]
Speed: TypeAlias = Annotated[float, Number]
CloudCover: TypeAlias = Annotated[float, Number]
Humidity: TypeAlias = Annotated[float, Number]
Probability: TypeAlias = Annotated[float, Number]
Intensity: TypeAlias = Annotated[float, Number]
MoonPhase: TypeAlias = Annotated[float, Number]
Pressure: TypeAlias = Annotated[float, Number]
Distance: TypeAlias = Annotated[float, Number]
Ozone: TypeAlias = Annotated[float, Number]


class TemperatureUnit(StrEnum):
    FAHRENHEIT = "F"
    CELSIUS = "C"


US_UNITS = "us"

WEATHER_ICONS: dict[str, str] = {
    "clear-day": "☀️",
    "clear-night": "🌙",
    "rain": "🌧",
    "snow": "🌨",
    "sleet": "🌨",
    "wind": "💨",
    "fog": "🌫",
    "cloudy": "☁️",
    "partly-cloudy-day": "⛅️",
    "partly-cloudy-night": "🌙",
    "hail": "🌧",
    "thunderstorm": "⛈",
    "tornado": "🌪",
}


def temperature_unit(units: str) -> TemperatureUnit:
    """Map a units convention code to its temperature label.

    Only "us" is Fahrenheit; si, ca, uk2 and unknown codes are Celsius.
    """
    if units == US_UNITS:
        return TemperatureUnit.FAHRENHEIT
    return TemperatureUnit.CELSIUS


def weather_icon(icon: str) -> str:
    """Glyph for a provider icon name, or "" when the name is unknown."""
    return WEATHER_ICONS.get(icon, "")


def from_unix(ts: int) -> datetime:
    return datetime.fromtimestamp(ts, UTC)

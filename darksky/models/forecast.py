"""Dark Sky forecast data models.

Field names follow Python conventions; the wire names are generated as
camelCase aliases, except for ``flags`` which the provider sends in
kebab-case. Both directions (parse and dump) use the wire names.
"""

import json
import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer
from pydantic.alias_generators import to_camel

from darksky.models.common import (
    Bearing,
    CloudCover,
    Coordinate,
    Distance,
    Humidity,
    Intensity,
    MoonPhase,
    Offset,
    Ozone,
    Pressure,
    Probability,
    Speed,
    Temperature,
    TemperatureUnit,
    UnixTime,
    UvIndex,
    from_unix,
    temperature_unit,
    weather_icon,
)
from darksky.models.errors import SchemaMismatch


def _to_kebab(name: str) -> str:
    return name.replace("_", "-")


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class Weather(_WireModel):
    time: UnixTime
    summary: str
    icon: str
    nearest_storm_distance: Distance | None = None
    nearest_storm_bearing: Bearing | None = None
    precip_intensity: Intensity
    precip_probability: Probability
    precip_type: str | None = None
    temperature: Temperature
    apparent_temperature: Temperature
    dew_point: Temperature
    humidity: Humidity
    pressure: Pressure
    wind_speed: Speed
    wind_gust: Speed
    wind_bearing: Bearing
    cloud_cover: CloudCover
    uv_index: UvIndex
    visibility: Distance
    ozone: Ozone

    @property
    def observed_at(self) -> datetime:
        return from_unix(self.time)


class Precipitation(_WireModel):
    time: UnixTime
    precip_intensity: Intensity
    precip_probability: Probability


class DailyWeather(_WireModel):
    time: UnixTime
    summary: str
    icon: str
    sunrise_time: UnixTime
    sunset_time: UnixTime
    moon_phase: MoonPhase
    precip_intensity: Intensity
    precip_intensity_max: Intensity
    precip_intensity_max_time: UnixTime | None = None
    precip_probability: Probability
    precip_type: str | None = None
    temperature_high: Temperature
    temperature_high_time: UnixTime
    temperature_low: Temperature
    temperature_low_time: UnixTime
    apparent_temperature_high: Temperature
    apparent_temperature_high_time: UnixTime
    apparent_temperature_low: Temperature
    apparent_temperature_low_time: UnixTime
    dew_point: Temperature
    humidity: Humidity
    pressure: Pressure
    wind_speed: Speed
    wind_gust: Speed
    wind_gust_time: UnixTime
    wind_bearing: Bearing
    cloud_cover: CloudCover
    uv_index: UvIndex
    uv_index_time: UnixTime
    visibility: Distance
    ozone: Ozone

    @property
    def sunrise_at(self) -> datetime:
        return from_unix(self.sunrise_time)

    @property
    def sunset_at(self) -> datetime:
        return from_unix(self.sunset_time)


class MinutelySeries(_WireModel):
    summary: str
    icon: str
    data: list[Precipitation]


class HourlySeries(_WireModel):
    summary: str
    icon: str
    data: list[Weather]


class DailySeries(_WireModel):
    summary: str
    icon: str
    data: list[DailyWeather]


class Alert(_WireModel):
    title: str
    time: UnixTime
    expires: UnixTime
    description: str
    uri: str

    @property
    def issued_at(self) -> datetime:
        return from_unix(self.time)

    @property
    def expires_at(self) -> datetime:
        return from_unix(self.expires)


class Flags(_WireModel):
    model_config = ConfigDict(alias_generator=_to_kebab)

    sources: list[str]
    nearest_station: Distance
    units: str


class ForecastResult(_WireModel):
    """A full forecast payload for one coordinate."""

    latitude: Coordinate
    longitude: Coordinate
    timezone: str
    currently: Weather
    minutely: MinutelySeries | None = None
    hourly: HourlySeries
    daily: DailySeries
    alerts: list[Alert] | None = None
    flags: Flags
    offset: Offset

    @classmethod
    def from_payload(cls, data: Any) -> "ForecastResult":
        """Validate an already-decoded JSON document.

        Raises SchemaMismatch when a required field is missing or a value has
        the wrong type; no partially built model is returned.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SchemaMismatch(
                f"Forecast payload does not match schema: {e.error_count()} error(s)\n{e}"
            ) from e

    @classmethod
    def from_json(cls, body: str | bytes) -> "ForecastResult":
        """Parse a response body, keeping coordinates at full precision."""
        try:
            data = json.loads(body, parse_float=Decimal)
        except ValueError as e:
            raise SchemaMismatch(f"Forecast body is not valid JSON: {e}") from e
        return cls.from_payload(data)

    def to_payload(self) -> dict[str, Any]:
        """Wire-shaped dict; absent optional fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @field_serializer("latitude", "longitude", when_used="json")
    def serialize_coordinate(self, value: Decimal) -> float | str:
        as_float = float(value)
        if Decimal(repr(as_float)) == value:
            return as_float
        return str(value)

    @property
    def unit(self) -> TemperatureUnit:
        return temperature_unit(self.flags.units)

    def summary(self) -> str:
        """One-line current conditions, e.g. ``61.2°F 🌫 Foggy``."""
        return (
            f"{format_temperature(self.currently.temperature)}°{self.unit} "
            f"{weather_icon(self.currently.icon)} {self.currently.summary}"
        )

    def __str__(self) -> str:
        return self.summary()


def format_temperature(value: float) -> str:
    """Render to one decimal place, rounding half up on the shortest repr.

    72.35 -> "72.4", 72.34 -> "72.3", -0.05 -> "-0.1".
    """
    if not math.isfinite(value):
        return f"{value:.1f}"
    with localcontext(prec=400):
        rounded = Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"

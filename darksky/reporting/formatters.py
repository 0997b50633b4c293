"""Output formatters for forecast results."""

from darksky.models.forecast import ForecastResult, format_temperature


def format_forecast_summary(result: ForecastResult) -> str:
    """Single line, e.g. ``61.2°F 🌫 Foggy``."""
    return result.summary()


def format_forecast_text(result: ForecastResult, location_name: str | None = None) -> str:
    """Plain text report for the terminal."""
    place = location_name or f"{result.latitude},{result.longitude}"
    lines = [
        f"=== Forecast for {place} ({result.timezone}) ===",
        f"Now: {result.summary()}",
    ]
    if result.minutely is not None:
        lines.append(f"Next hour: {result.minutely.summary}")
    lines.append(f"Next 48h: {result.hourly.summary}")
    lines.append(f"This week: {result.daily.summary}")

    if result.daily.data:
        today = result.daily.data[0]
        lines.append(
            f"Today: high {format_temperature(today.temperature_high)}°{result.unit}, "
            f"low {format_temperature(today.temperature_low)}°{result.unit}, "
            f"precip {today.precip_probability:.0%}"
        )

    for alert in result.alerts or []:
        lines.append(
            f"ALERT: {alert.title} (until {alert.expires_at:%Y-%m-%d %H:%M} UTC)"
        )
    lines.append(f"Sources: {', '.join(result.flags.sources)}")
    return "\n".join(lines)


def format_forecast_json(result: ForecastResult) -> str:
    """Wire-shaped JSON for programmatic consumption."""
    return result.to_json(indent=2)

"""Errors raised while fetching and parsing forecasts."""


class ForecastError(Exception):
    """Base class: the forecast is unavailable."""


class TransportError(ForecastError):
    """The request failed or the provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SchemaMismatch(ForecastError):
    """The response body is not JSON or does not match the forecast schema."""

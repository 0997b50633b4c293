"""Dark Sky forecast API client: one GET per call, parsed into ForecastResult."""

import logging
from decimal import Decimal, InvalidOperation
from urllib.parse import quote

import httpx

from darksky.models.errors import ForecastError, SchemaMismatch, TransportError
from darksky.models.forecast import ForecastResult

logger = logging.getLogger(__name__)

DARKSKY_BASE_URL = "https://api.darksky.net"
DEFAULT_USER_AGENT = "darksky-client/0.1.0"

__all__ = [
    "DARKSKY_BASE_URL",
    "DarkskyClient",
    "ForecastError",
    "SchemaMismatch",
    "TransportError",
    "build_forecast_url",
    "fetch",
    "to_coordinate",
]

CoordinateInput = Decimal | int | float | str


def to_coordinate(value: CoordinateInput) -> Decimal:
    """Coerce a coordinate to an exact Decimal.

    Floats go through their shortest repr so 37.8267 stays 37.8267. Raises
    decimal.InvalidOperation for text that is not a number and for NaN or
    infinity.
    """
    if isinstance(value, bool):
        raise TypeError("coordinate must be a number, not bool")
    if isinstance(value, Decimal):
        coordinate = value
    elif isinstance(value, float):
        coordinate = Decimal(repr(value))
    else:
        coordinate = Decimal(value)
    if not coordinate.is_finite():
        raise InvalidOperation(f"coordinate must be finite, got {value!r}")
    return coordinate


def build_forecast_url(
    api_key: str,
    latitude: CoordinateInput,
    longitude: CoordinateInput,
    base_url: str = DARKSKY_BASE_URL,
) -> str:
    """Build ``<base>/forecast/<key>/<lat>,<lng>``.

    The key is percent-encoded; coordinates are written in plain decimal
    notation, never exponent form.
    """
    lat = to_coordinate(latitude)
    lng = to_coordinate(longitude)
    return f"{base_url.rstrip('/')}/forecast/{quote(api_key, safe='')}/{lat:f},{lng:f}"


class DarkskyClient:
    """Fetches forecasts from the Dark Sky API.

    Pass ``http_client`` to reuse a caller-owned ``httpx.AsyncClient``;
    otherwise each call opens and closes its own.
    """

    def __init__(
        self,
        base_url: str = DARKSKY_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    async def fetch(
        self, api_key: str, latitude: CoordinateInput, longitude: CoordinateInput
    ) -> ForecastResult:
        """Fetch and parse the forecast for one coordinate.

        Raises TransportError if the request fails or returns a non-2xx
        status, SchemaMismatch if the body does not parse. No retries.
        """
        url = build_forecast_url(api_key, latitude, longitude, self.base_url)
        safe_url = build_forecast_url("REDACTED", latitude, longitude, self.base_url)
        logger.debug("GET %s", safe_url)

        body = await self._get(url, safe_url)
        try:
            result = ForecastResult.from_json(body)
        except SchemaMismatch as e:
            logger.error("Dark Sky response for %s did not parse: %s", safe_url, e)
            raise
        logger.debug(
            "Forecast for %s,%s: %d hourly, %d daily, %d alerts",
            result.latitude, result.longitude,
            len(result.hourly.data), len(result.daily.data),
            len(result.alerts or []),
        )
        return result

    async def _get(self, url: str, safe_url: str) -> bytes:
        headers = {"User-Agent": self.user_agent}
        try:
            if self.http_client is not None:
                resp = await self.http_client.get(url, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, headers=headers)
        except httpx.RequestError as e:
            logger.error("Dark Sky request failed: %s -> %s", safe_url, e)
            raise TransportError(f"Request failed: {e}") from e

        if not resp.is_success:
            logger.error("Dark Sky API %d: GET %s", resp.status_code, safe_url)
            raise TransportError(
                f"HTTP {resp.status_code}: {resp.text[:200]}", resp.status_code
            )
        return resp.content


async def fetch(
    api_key: str, latitude: CoordinateInput, longitude: CoordinateInput
) -> ForecastResult:
    """Fetch a forecast with a default client."""
    return await DarkskyClient().fetch(api_key, latitude, longitude)

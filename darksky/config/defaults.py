"""Default locations with their forecast coordinates."""

from decimal import Decimal

from darksky.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(
        name="San Francisco",
        slug="sf",
        latitude=Decimal("37.8267"),
        longitude=Decimal("-122.4233"),
    ),
    LocationConfig(
        name="New York City",
        slug="nyc",
        latitude=Decimal("40.7128"),
        longitude=Decimal("-74.0060"),
    ),
    LocationConfig(
        name="London",
        slug="london",
        latitude=Decimal("51.5074"),
        longitude=Decimal("-0.1278"),
    ),
]

"""Pydantic v2 configuration schema with strict validation."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from darksky.ingest.darksky_client import (
    DARKSKY_BASE_URL,
    DEFAULT_USER_AGENT,
    to_coordinate,
)


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DARKSKY_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    latitude: Decimal
    longitude: Decimal

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def exact_coordinate(cls, value):
        # YAML reads 37.8267 as a float
        if isinstance(value, float):
            try:
                return to_coordinate(value)
            except ArithmeticError as e:
                raise ValueError(str(e)) from e
        return value


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    client: ClientConfig = ClientConfig()
    default_location: str | None = None
    locations: list[LocationConfig] = []

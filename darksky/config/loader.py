"""YAML config loader with environment fallback for the API key."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from darksky.config.defaults import DEFAULT_LOCATIONS
from darksky.config.schema import AppConfig, LocationConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "DARKSKY_API_KEY"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields defaults. If no locations are specified,
    injects DEFAULT_LOCATIONS; an empty api_key is taken from DARKSKY_API_KEY.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise ValueError(
                    f"Config {path} must be a mapping, got {type(raw).__name__}"
                )
        else:
            logger.info("Config %s not found, using defaults", path)

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    if not raw.get("api_key"):
        raw["api_key"] = os.environ.get(API_KEY_ENV, "")

    return AppConfig(**raw)


def find_location(config: AppConfig, slug: str) -> LocationConfig:
    for loc in config.locations:
        if loc.slug == slug:
            return loc
    raise KeyError(f"Unknown location: {slug}")


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'client.timeout'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: AppConfig) -> AppConfig:
    """Copy of the config safe to print."""
    if not config.api_key:
        return config
    return config.model_copy(update={"api_key": "<redacted>"})

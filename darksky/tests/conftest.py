"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from darksky.config.defaults import DEFAULT_LOCATIONS
from darksky.config.schema import AppConfig
from darksky.models.forecast import ForecastResult

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def sf_body() -> str:
    """Raw response body for San Francisco (us units, all optionals present)."""
    return (FIXTURE_DIR / "darksky_forecast_sf.json").read_text()


@pytest.fixture
def sf_payload(sf_body: str) -> dict:
    return json.loads(sf_body)


@pytest.fixture
def london_body() -> str:
    """Raw response body for London (uk2 units, no minutely or alerts)."""
    return (FIXTURE_DIR / "darksky_forecast_london.json").read_text()


@pytest.fixture
def sf_result(sf_body: str) -> ForecastResult:
    return ForecastResult.from_json(sf_body)


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default locations."""
    return AppConfig(api_key="test-key", locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api_key": "yaml-key",
        "client": {"base_url": "https://test-darksky.example.com", "timeout": 5.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path

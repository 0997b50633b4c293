"""CLI entry point for the Dark Sky forecast client."""

import argparse
import asyncio
import logging
import sys

import yaml
from pydantic import ValidationError

from darksky.config.loader import (
    find_location,
    get_config_value,
    load_config,
    redacted,
)
from darksky.config.schema import AppConfig
from darksky.ingest.darksky_client import DarkskyClient, ForecastError, to_coordinate
from darksky.reporting.formatters import (
    format_forecast_json,
    format_forecast_summary,
    format_forecast_text,
)

DEFAULT_CONFIG = "darksky.yaml"

FORMATTERS = {
    "summary": lambda result, name: format_forecast_summary(result),
    "text": format_forecast_text,
    "json": lambda result, name: format_forecast_json(result),
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="darksky",
        description="Dark Sky forecast client",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch the forecast for a location")
    fc_p.add_argument("location", nargs="?", help="Configured location slug")
    fc_p.add_argument("--lat", help="Latitude (overrides location)")
    fc_p.add_argument("--lng", help="Longitude (overrides location)")
    fc_p.add_argument("--api-key", help="API key (default: config or $DARKSKY_API_KEY)")
    fc_p.add_argument(
        "--format", choices=sorted(FORMATTERS), default="summary",
        help="Output format",
    )

    # locations
    sub.add_parser("locations", help="List configured locations")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. client.timeout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full request URLs, which carry the API key
    logging.getLogger("httpx").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except (yaml.YAMLError, ValidationError, ValueError, OSError) as e:
        print(f"Error: invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "locations":
        return _cmd_locations(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config: AppConfig, args) -> int:
    api_key = args.api_key or config.api_key
    if not api_key:
        print("Error: no API key (use --api-key or DARKSKY_API_KEY)", file=sys.stderr)
        return 1

    name = None
    if args.lat is not None or args.lng is not None:
        if args.lat is None or args.lng is None:
            print("Error: --lat and --lng must be given together", file=sys.stderr)
            return 1
        try:
            lat, lng = to_coordinate(args.lat), to_coordinate(args.lng)
        except ArithmeticError:
            print(f"Error: invalid coordinate {args.lat},{args.lng}", file=sys.stderr)
            return 1
    else:
        slug = args.location or config.default_location
        if slug is None:
            print("Error: give a location or --lat/--lng", file=sys.stderr)
            return 1
        try:
            loc = find_location(config, slug)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 1
        lat, lng, name = loc.latitude, loc.longitude, loc.name

    client = DarkskyClient(
        base_url=config.client.base_url,
        user_agent=config.client.user_agent,
        timeout=config.client.timeout,
    )
    try:
        result = asyncio.run(client.fetch(api_key, lat, lng))
    except ForecastError as e:
        print(f"Forecast unavailable: {e}", file=sys.stderr)
        return 1

    print(FORMATTERS[args.format](result, name))
    return 0


def _cmd_locations(config: AppConfig) -> int:
    for loc in config.locations:
        marker = "*" if loc.slug == config.default_location else " "
        print(f"{marker} {loc.slug:<12} {loc.latitude},{loc.longitude}  {loc.name}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    safe = redacted(config)
    if args.config_command == "show":
        print(safe.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(safe, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1


if __name__ == "__main__":
    sys.exit(main())

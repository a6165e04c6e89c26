#!/usr/bin/env python3
"""
Generate a pilot career schedule from a JSON request file.

Usage: python3 generate_schedule.py <request_file.json> <routes.csv>

Reads the schedule request from JSON and the route catalog from CSV, and
writes the generated schedule as JSON to stdout. Log messages go to stderr.

Request keys: start_location, duration_days (required); end_location,
home_base, end_default, haul_preferences ("short"/"medium"/"long"/"any" or
{"short": n, "medium": n, "long": n}), preferred_airline, airline_only,
max_layover_minutes, start_datetime (ISO), timezone, policy
("score_ranked"/"weighted_random"), seed, airports (extra known codes).
"""

import json
import logging
import sys
from collections.abc import Mapping
from typing import Any

from career.catalog import load_catalog_csv
from career.generator import ScheduleGenerator
from career.scheduling.selection import get_policy
from career.time_utils import parse_iso_datetime
from career.types import DEFAULT_MAX_LAYOVER_MIN, HaulPreferences, ScheduleRequest

logger = logging.getLogger("generate_schedule")


def haul_preferences_from_value(value: Any) -> HaulPreferences:
    """Accept either a single bucket name or a weight mapping."""
    if value is None:
        return HaulPreferences()
    if isinstance(value, str):
        return HaulPreferences.from_bucket(value)
    if not isinstance(value, Mapping):
        raise ValueError("haul_preferences must be a bucket name or a weight mapping")
    return HaulPreferences(
        short=value.get("short", 0),
        medium=value.get("medium", 0),
        long=value.get("long", 0),
    )


def airports_from_value(value: Any) -> list[str] | None:
    """Extra known airport codes; must be a list of strings."""
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(code, str) for code in value):
        raise ValueError("airports must be a list of airport codes")
    return value


def request_from_dict(data: dict[str, Any]) -> ScheduleRequest:
    """
    Build a ScheduleRequest from decoded JSON.

    Raises:
        KeyError: missing required field
        ValueError: not a JSON object, malformed haul preference or datetime
    """
    if not isinstance(data, dict):
        raise ValueError("request must be a JSON object")
    start_datetime = data.get("start_datetime")
    return ScheduleRequest(
        start_location=data["start_location"],
        duration_days=data["duration_days"],
        haul_preferences=haul_preferences_from_value(data.get("haul_preferences")),
        end_location=data.get("end_location"),
        home_base=data.get("home_base"),
        end_default=data.get("end_default", "start_location"),
        preferred_airline=data.get("preferred_airline"),
        airline_only=data.get("airline_only", False),
        max_layover_minutes=data.get("max_layover_minutes", DEFAULT_MAX_LAYOVER_MIN),
        start_datetime=parse_iso_datetime(start_datetime) if start_datetime else None,
        timezone=data.get("timezone", "UTC"),
    )


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(sys.argv) != 3:
        print(json.dumps({"error": "Usage: generate_schedule.py <request_file.json> <routes.csv>"}))
        sys.exit(1)

    request_file, catalog_file = sys.argv[1], sys.argv[2]

    try:
        with open(request_file) as f:
            data = json.load(f)

        request = request_from_dict(data)
        catalog = load_catalog_csv(catalog_file, airports=airports_from_value(data.get("airports")))
        policy = get_policy(data.get("policy", "score_ranked"), seed=data.get("seed"))

        result = ScheduleGenerator(policy).generate_schedule(request, catalog)
        if result.ok:
            logger.info(f"Generated {len(result.flights)} legs ({result.total_minutes} min)")
        else:
            logger.warning(f"Schedule generation failed: {result.failure.message}")

        print(json.dumps(result.to_dict()))
        if not result.ok:
            sys.exit(2)

    except FileNotFoundError as e:
        print(json.dumps({"error": f"File not found: {e.filename}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)
    except KeyError as e:
        print(json.dumps({"error": f"Missing required field: {e}"}))
        sys.exit(1)
    except ValueError as e:
        print(json.dumps({"error": f"Invalid request: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    main()

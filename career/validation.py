"""
Schedule request validation.

Requests are checked before any catalog lookup; the first problem found is
returned as a message, None means the request is valid.
"""

import math
import re

import pytz

from .types import HAUL_TYPES, ScheduleRequest

IATA_PATTERN = re.compile(r"^[A-Z]{3}$")
AIRLINE_PATTERN = re.compile(r"^[A-Z0-9]{2,3}$")

MIN_DURATION_DAYS = 1
MAX_DURATION_DAYS = 30


def validate_iata(code: object) -> bool:
    """Validate a 3-letter uppercase airport code like 'LAX'."""
    return isinstance(code, str) and bool(IATA_PATTERN.match(code))


def validate_airline(code: object) -> bool:
    """Validate an airline designator like 'UA' or 'BAW'."""
    return isinstance(code, str) and bool(AIRLINE_PATTERN.match(code))


def validate_request(request: ScheduleRequest) -> str | None:
    """Validate a schedule request, return error message or None if valid."""
    if not validate_iata(request.start_location):
        return f"Invalid start location: {request.start_location!r}"
    if request.end_location is not None and not validate_iata(request.end_location):
        return f"Invalid end location: {request.end_location!r}"
    if request.home_base is not None and not validate_iata(request.home_base):
        return f"Invalid home base: {request.home_base!r}"
    if request.end_default not in ("start_location", "home_base"):
        return f"Invalid end_default: {request.end_default!r}"

    days = request.duration_days
    if isinstance(days, bool) or not isinstance(days, int):
        return "duration_days must be an integer"
    if days < MIN_DURATION_DAYS or days > MAX_DURATION_DAYS:
        return f"duration_days must be between {MIN_DURATION_DAYS} and {MAX_DURATION_DAYS}"

    prefs = request.haul_preferences
    for haul in HAUL_TYPES:
        weight = prefs.weight_for(haul)
        valid = (
            not isinstance(weight, bool)
            and isinstance(weight, int | float)
            and math.isfinite(weight)
            and weight >= 0
        )
        if not valid:
            return f"Haul preference '{haul}' must be a non-negative number"
    if prefs.total <= 0:
        return "At least one haul preference must have a positive weight"

    if request.preferred_airline is not None and not validate_airline(request.preferred_airline):
        return f"Invalid preferred airline: {request.preferred_airline!r}"
    if request.airline_only and request.preferred_airline is None:
        return "airline_only requires a preferred airline"

    layover = request.max_layover_minutes
    if isinstance(layover, bool) or not isinstance(layover, int) or layover < 0:
        return "max_layover_minutes must be a non-negative integer"

    if request.timezone not in pytz.all_timezones_set:
        return f"Unknown timezone: {request.timezone}"

    return None

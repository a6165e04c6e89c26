"""
Haul classification.

Flights are bucketed by block time alone:
- short: up to 3 hours
- medium: over 3 and up to 6 hours
- long: over 6 hours
"""

from .types import HaulType

SHORT_HAUL_MAX_MIN = 180
MEDIUM_HAUL_MAX_MIN = 360


def classify_haul(duration_min: float) -> HaulType:
    """Map a flight duration in minutes to its haul type."""
    if duration_min <= SHORT_HAUL_MAX_MIN:
        return "short"
    if duration_min <= MEDIUM_HAUL_MAX_MIN:
        return "medium"
    return "long"


def haul_bounds(haul: HaulType) -> tuple[float, float]:
    """
    Duration band for a haul type as (exclusive lower, inclusive upper) minutes.

    Useful for catalog queries by duration band.
    """
    if haul == "short":
        return (0, SHORT_HAUL_MAX_MIN)
    if haul == "medium":
        return (SHORT_HAUL_MAX_MIN, MEDIUM_HAUL_MAX_MIN)
    return (MEDIUM_HAUL_MAX_MIN, float("inf"))

"""
Test helper functions for schedule validation.

These functions can be imported by test modules for schedule analysis.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from career.catalog import InMemoryRouteCatalog
from career.types import GeneratedFlight, HaulType, Route

_next_id = [1000]


def make_route(
    departure: str,
    arrival: str,
    duration_min: int,
    airline: str = "UA",
    route_id: int | None = None,
) -> Route:
    """Build a Route with an auto-assigned id when none is given."""
    if route_id is None:
        _next_id[0] += 1
        route_id = _next_id[0]
    return Route(
        route_id=route_id,
        departure_iata=departure,
        arrival_iata=arrival,
        airline_iata=airline,
        duration_min=duration_min,
        distance_km=duration_min * 8.0,
    )


def leg_pairs(flights: list[GeneratedFlight]) -> list[tuple[GeneratedFlight, GeneratedFlight]]:
    """Consecutive (previous, next) leg pairs."""
    return list(zip(flights, flights[1:]))


def rotation_violations(flights: list[GeneratedFlight], home_base: str) -> list[str]:
    """
    Describe every leg that breaks the long-haul rotation rule.

    After a long-haul leg that didn't land at home base, the next leg must
    also be long-haul.
    """
    violations = []
    for prev, nxt in leg_pairs(flights):
        if prev.haul_type == "long" and prev.arrival_iata != home_base and nxt.haul_type != "long":
            violations.append(
                f"leg {nxt.sequence} ({nxt.departure_iata}->{nxt.arrival_iata}) is "
                f"{nxt.haul_type} after long-haul into {prev.arrival_iata}"
            )
    return violations


def is_connected(flights: list[GeneratedFlight]) -> bool:
    """Every leg departs where the previous one arrived."""
    return all(prev.arrival_iata == nxt.departure_iata for prev, nxt in leg_pairs(flights))


def haul_counts(flights: list[GeneratedFlight]) -> dict[HaulType, int]:
    counts: dict[HaulType, int] = {"short": 0, "medium": 0, "long": 0}
    for flight in flights:
        counts[flight.haul_type] += 1
    return counts


class SpyCatalog:
    """Wraps a catalog and records every call made to it."""

    def __init__(self, catalog: InMemoryRouteCatalog) -> None:
        self.catalog = catalog
        self.find_calls: list[tuple] = []
        self.airport_calls: list[str] = []

    def has_airport(self, iata: str) -> bool:
        self.airport_calls.append(iata)
        return self.catalog.has_airport(iata)

    def find_routes(self, departure, arrival=None, airline=None, haul_filter=None):
        self.find_calls.append((departure, arrival, airline, haul_filter))
        return self.catalog.find_routes(departure, arrival, airline, haul_filter)

"""
Pytest fixtures for schedule generation tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest
import pytz

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from career.catalog import InMemoryRouteCatalog
from career.types import Route

START = datetime(2026, 3, 2, 8, 0, tzinfo=pytz.UTC)


@pytest.fixture
def start_datetime():
    """Fixed first departure (Monday 08:00 UTC)."""
    return START


@pytest.fixture
def network_routes():
    """
    Small route network around a LAX home base.

    Short hops on the west coast and north-east, medium transcons, long-haul
    to Tokyo/Sydney/London with short regional legs hanging off the far ends.
    """
    rows = [
        (1, "LAX", "SFO", "UA", 80),
        (2, "SFO", "LAX", "UA", 85),
        (3, "LAX", "JFK", "AA", 330),
        (4, "JFK", "LAX", "AA", 360),
        (5, "LAX", "NRT", "JL", 660),
        (6, "NRT", "LAX", "JL", 600),
        (7, "NRT", "SYD", "QF", 580),
        (8, "SYD", "LAX", "QF", 840),
        (9, "NRT", "ICN", "KE", 150),
        (10, "ICN", "NRT", "KE", 140),
        (11, "JFK", "LHR", "BA", 420),
        (12, "LHR", "JFK", "BA", 480),
        (13, "LHR", "CDG", "AF", 75),
        (14, "CDG", "LHR", "AF", 80),
        (15, "JFK", "BOS", "B6", 75),
        (16, "BOS", "JFK", "B6", 80),
        (17, "SFO", "JFK", "UA", 320),
        (18, "JFK", "SFO", "UA", 355),
        (19, "SFO", "SEA", "AS", 120),
        (20, "SEA", "SFO", "AS", 125),
        (21, "SEA", "LAX", "AS", 165),
        (22, "LAX", "SEA", "AS", 170),
        (23, "JFK", "LAX", "DL", 370),
    ]
    return [
        Route(
            route_id=rid,
            departure_iata=dep,
            arrival_iata=arr,
            airline_iata=airline,
            duration_min=duration,
            distance_km=duration * 8.0,
        )
        for rid, dep, arr, airline, duration in rows
    ]


@pytest.fixture
def network_catalog(network_routes):
    """InMemoryRouteCatalog over network_routes, plus DEN (no service)."""
    return InMemoryRouteCatalog(network_routes, airports=["DEN"])


@pytest.fixture
def lax_jfk_catalog():
    """Single LAX→JFK route (330 min, medium) that also knows SFO as an airport."""
    return InMemoryRouteCatalog(
        [Route(route_id=1, departure_iata="LAX", arrival_iata="JFK", airline_iata="AA", duration_min=330)],
        airports=["SFO"],
    )

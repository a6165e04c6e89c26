"""
Pilot Career Schedule Generation

Builds multi-leg flight schedules from a static route catalog for the pilot
career mode: fits the duration budget, honours turnaround time and aircraft
rotation, and follows the pilot's haul-length and airline preferences.

Main entry point: ScheduleGenerator / generate_schedule
"""

from .catalog import (
    InMemoryRouteCatalog,
    MemoizedRouteCatalog,
    RouteCatalog,
    RouteQuery,
    load_catalog_csv,
    routes_from_rows,
)
from .generator import ScheduleGenerator, generate_schedule
from .haul import classify_haul
from .scheduling import (
    RouteScorer,
    ScoreRankedPolicy,
    SelectionPolicy,
    WeightedRandomPolicy,
    get_policy,
)
from .types import (
    GeneratedFlight,
    HaulPreferences,
    HaulType,
    Route,
    ScheduleFailure,
    ScheduleRequest,
    ScheduleResult,
)
from .validation import validate_request

__all__ = [
    # Types
    "Route",
    "HaulType",
    "HaulPreferences",
    "ScheduleRequest",
    "GeneratedFlight",
    "ScheduleFailure",
    "ScheduleResult",
    # Catalog
    "RouteCatalog",
    "RouteQuery",
    "InMemoryRouteCatalog",
    "MemoizedRouteCatalog",
    "load_catalog_csv",
    "routes_from_rows",
    # Scheduling
    "classify_haul",
    "RouteScorer",
    "SelectionPolicy",
    "WeightedRandomPolicy",
    "ScoreRankedPolicy",
    "get_policy",
    "validate_request",
    # Generator
    "ScheduleGenerator",
    "generate_schedule",
]

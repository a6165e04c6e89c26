"""
Route catalog adapters.

The generator only depends on the RouteCatalog protocol: look up routes
departing an airport (optionally to a given arrival, for one airline, in one
haul band) and check whether an airport exists at all. "No routes" is an
ordinary empty list, never an error.
"""

import csv
import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from .haul import classify_haul, haul_bounds
from .types import HaulType, Route
from .validation import validate_airline, validate_iata

logger = logging.getLogger(__name__)

CSV_COLUMNS = (
    "route_id",
    "departure_iata",
    "arrival_iata",
    "airline_iata",
    "duration_min",
    "distance_km",
)


class RouteCatalog(Protocol):
    """Query surface the schedule generator needs from a route source."""

    def find_routes(
        self,
        departure: str,
        arrival: str | None = None,
        airline: str | None = None,
        haul_filter: HaulType | None = None,
    ) -> list[Route]: ...

    def has_airport(self, iata: str) -> bool: ...


@dataclass
class RouteQuery:
    """Route browser filters. Unset fields don't filter."""

    departure: str | None = None
    arrival: str | None = None
    airline: str | None = None
    haul: HaulType | None = None
    min_duration: int | None = None
    max_duration: int | None = None
    limit: int = 100
    offset: int = 0


def _matches(
    route: Route,
    arrival: str | None,
    airline: str | None,
    haul_filter: HaulType | None,
) -> bool:
    if arrival and route.arrival_iata != arrival:
        return False
    if airline and route.airline_iata != airline:
        return False
    if haul_filter and classify_haul(route.duration_min) != haul_filter:
        return False
    return True


class InMemoryRouteCatalog:
    """
    Catalog backed by a list of routes.

    Routes keep their insertion order so lookups are stable. Known airports are
    every route endpoint plus any extra codes passed in (airports with no
    scheduled service are still valid airports).
    """

    def __init__(self, routes: Iterable[Route], airports: Iterable[str] | None = None) -> None:
        self._routes: list[Route] = list(routes)
        self._by_departure: dict[str, list[Route]] = {}
        self._airports: set[str] = set(airports or ())

        for route in self._routes:
            self._by_departure.setdefault(route.departure_iata, []).append(route)
            self._airports.add(route.departure_iata)
            self._airports.add(route.arrival_iata)

    def __len__(self) -> int:
        return len(self._routes)

    @property
    def airports(self) -> set[str]:
        return set(self._airports)

    def has_airport(self, iata: str) -> bool:
        return iata in self._airports

    def find_routes(
        self,
        departure: str,
        arrival: str | None = None,
        airline: str | None = None,
        haul_filter: HaulType | None = None,
    ) -> list[Route]:
        return [
            route
            for route in self._by_departure.get(departure, [])
            if _matches(route, arrival, airline, haul_filter)
        ]

    def search_routes(self, query: RouteQuery) -> list[Route]:
        """
        Browse routes with the route-table filters.

        Results are ordered by departure, arrival, airline then route id, and
        paged with limit/offset.
        """
        min_duration = query.min_duration
        max_duration = query.max_duration
        if query.haul:
            low, high = haul_bounds(query.haul)
            min_duration = max(min_duration or 0, int(low) + 1)
            if high != float("inf"):
                max_duration = (
                    min(max_duration, int(high)) if max_duration is not None else int(high)
                )

        source = (
            self._by_departure.get(query.departure, []) if query.departure else self._routes
        )
        results = []
        for route in source:
            if not _matches(route, query.arrival, query.airline, None):
                continue
            if min_duration is not None and route.duration_min < min_duration:
                continue
            if max_duration is not None and route.duration_min > max_duration:
                continue
            results.append(route)

        results.sort(
            key=lambda r: (r.departure_iata, r.arrival_iata, r.airline_iata, r.route_id)
        )
        return results[query.offset : query.offset + query.limit]


class MemoizedRouteCatalog:
    """
    Per-run memo in front of another catalog.

    Lookups are keyed by (departure, arrival, airline, haul_filter). The
    generator creates one per call, so nothing leaks between runs.
    """

    def __init__(self, catalog: RouteCatalog) -> None:
        self._catalog = catalog
        self._routes: dict[tuple, list[Route]] = {}
        self._airports: dict[str, bool] = {}
        self.lookups = 0  # Calls that reached the wrapped catalog

    def has_airport(self, iata: str) -> bool:
        if iata not in self._airports:
            self._airports[iata] = self._catalog.has_airport(iata)
        return self._airports[iata]

    def find_routes(
        self,
        departure: str,
        arrival: str | None = None,
        airline: str | None = None,
        haul_filter: HaulType | None = None,
    ) -> list[Route]:
        key = (departure, arrival, airline, haul_filter)
        if key not in self._routes:
            self.lookups += 1
            self._routes[key] = list(
                self._catalog.find_routes(departure, arrival, airline, haul_filter)
            )
        return list(self._routes[key])


def route_from_row(row: Mapping[str, Any]) -> Route:
    """
    Build a Route from a CSV/JSON row.

    Raises:
        ValueError: missing or malformed field
        KeyError: missing column
    """
    departure = str(row["departure_iata"]).strip().upper()
    arrival = str(row["arrival_iata"]).strip().upper()
    airline = str(row["airline_iata"]).strip().upper()

    if not validate_iata(departure):
        raise ValueError(f"Invalid departure airport: {departure!r}")
    if not validate_iata(arrival):
        raise ValueError(f"Invalid arrival airport: {arrival!r}")
    if not validate_airline(airline):
        raise ValueError(f"Invalid airline code: {airline!r}")

    duration = float(row["duration_min"])
    if not math.isfinite(duration):
        raise ValueError(f"Invalid duration: {row['duration_min']!r}")

    distance = row.get("distance_km")
    return Route(
        route_id=int(row["route_id"]),
        departure_iata=departure,
        arrival_iata=arrival,
        airline_iata=airline,
        duration_min=int(duration),
        distance_km=float(distance) if distance not in (None, "") else None,
    )


def routes_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[Route]:
    """Convert rows to routes, skipping (and logging) rows that don't parse."""
    routes = []
    for line_number, row in enumerate(rows, start=1):
        try:
            routes.append(route_from_row(row))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping route row {line_number}: {e}")
    return routes


def load_catalog_csv(path: str | Path, airports: Iterable[str] | None = None) -> InMemoryRouteCatalog:
    """
    Load a route catalog from CSV.

    Expected columns: route_id, departure_iata, arrival_iata, airline_iata,
    duration_min, distance_km (distance may be blank).
    """
    path = Path(path)
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        missing = [c for c in CSV_COLUMNS[:-1] if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"Route catalog {path} is missing columns: {', '.join(missing)}")
        routes = routes_from_rows(reader)

    catalog = InMemoryRouteCatalog(routes, airports=airports)
    logger.info(f"Loaded {len(catalog)} routes covering {len(catalog.airports)} airports from {path}")
    return catalog

"""
Leg-by-leg schedule generation.

Walks the route graph from the start airport, one leg at a time, until the
duration budget runs out or the schedule lands at its end airport.

Each iteration:
1. Closing check: inside the last 24 hours, try to fly straight to the end
2. Fetch candidates departing the current airport
3. Rotation filter: long-haul only while away from home base on a widebody
4. Drop candidates that no longer fit the remaining budget
5. Selection policy orders what is left; the first route is flown

Failures come back as values in ScheduleResult, never as exceptions.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

import pytz

from .catalog import MemoizedRouteCatalog, RouteCatalog
from .haul import classify_haul
from .scheduling.continuity import RotationFilter
from .scheduling.scoring import RouteScorer
from .scheduling.selection import ScoreRankedPolicy, SelectionPolicy
from .time_utils import get_current_datetime_in_tz, localize
from .types import (
    FailureKind,
    GeneratedFlight,
    GenerationStatus,
    HaulType,
    Route,
    ScheduleFailure,
    ScheduleRequest,
    ScheduleResult,
)
from .validation import validate_request

# Remaining budget below which the generator heads for the end airport
CLOSING_WINDOW_MIN = 24 * 60
# Shortest leg the iteration bound assumes
MIN_LEG_MIN = 1

FAILURE_KINDS: dict[GenerationStatus, FailureKind] = {
    "invalid_request": "invalid_request",
    "unknown_airport": "unknown_airport",
    "no_routes": "no_routes_available",
    "infeasible": "schedule_infeasible",
    "exhausted": "schedule_infeasible",
}


@dataclass
class GeneratorState:
    """Running state of one generation call."""

    current_location: str
    elapsed_minutes: int = 0
    current_haul_type: HaulType | None = None
    flights: list[GeneratedFlight] = field(default_factory=list)
    iterations: int = 0


class ScheduleGenerator:
    """
    Generate a pilot career schedule from a route catalog.

    The selection policy is the only thing that differs between the
    weighted-random and the deterministic score-ranked generator. The
    generator itself keeps no per-run state, so one instance can serve many
    requests.
    """

    def __init__(self, policy: SelectionPolicy | None = None) -> None:
        self.policy = policy if policy is not None else ScoreRankedPolicy()

    def generate_schedule(self, request: ScheduleRequest, catalog: RouteCatalog) -> ScheduleResult:
        """
        Generate a schedule for the request.

        Args:
            request: Start/end airports, budget and preferences
            catalog: Route source

        Returns:
            ScheduleResult; status "success" only when the last leg lands at
            the request's end airport within budget
        """
        error = validate_request(request)
        if error:
            return self._result("invalid_request", None, message=error)

        end_location = request.resolved_end_location
        for code in (request.start_location, end_location):
            if not catalog.has_airport(code):
                return self._result(
                    "unknown_airport", None, message=f"Unknown airport: {code}", location=code
                )

        catalog = MemoizedRouteCatalog(catalog)
        start_instant = self._start_instant(request)
        scorer = RouteScorer(request.haul_preferences, request.preferred_airline)
        rotation = RotationFilter(request.resolved_home_base)
        state = GeneratorState(current_location=request.start_location)

        budget = request.total_budget_minutes
        turnaround = request.turnaround_minutes
        airline = request.preferred_airline if request.airline_only else None
        max_iterations = budget // max(1, MIN_LEG_MIN + turnaround) + 1

        while state.elapsed_minutes < budget and state.iterations < max_iterations:
            state.iterations += 1
            remaining = budget - state.elapsed_minutes
            location = state.current_location

            # 1. Closing check
            if remaining < CLOSING_WINDOW_MIN:
                if state.flights and location == end_location:
                    return self._result("success", state, rotation)
                closing = self._find_closing_route(
                    catalog, state, end_location, airline, rotation, scorer, remaining, turnaround
                )
                if closing is not None:
                    self._fly(state, closing, start_instant, turnaround)
                    return self._result("success", state, rotation)

            # 2. Candidates
            candidates = catalog.find_routes(location, airline=airline)
            if not candidates:
                if state.flights and location == end_location:
                    return self._result("success", state, rotation)
                if not state.flights:
                    return self._result(
                        "no_routes",
                        state,
                        rotation,
                        message=f"No routes available from {location}",
                        location=location,
                    )
                return self._result(
                    "infeasible",
                    state,
                    rotation,
                    message=f"No onward routes from {location}; cannot reach {end_location}",
                    location=location,
                )

            # 3. Rotation
            eligible = rotation.filter_routes(candidates, location, state.current_haul_type)
            if not eligible:
                if state.flights and location == end_location:
                    return self._result("success", state, rotation)
                return self._result(
                    "no_routes",
                    state,
                    rotation,
                    message=f"No long-haul routes from {location} to continue the rotation",
                    location=location,
                )

            # 4. Budget
            fitting = [r for r in eligible if r.duration_min + turnaround <= remaining]
            if not fitting:
                break

            # 5. Selection
            ranked = self.policy.rank(fitting, scorer)
            self._fly(state, ranked[0], start_instant, turnaround)

        if state.flights and state.current_location == end_location:
            return self._result("success", state, rotation)
        return self._result(
            "exhausted",
            state,
            rotation,
            message=(
                f"Duration budget exhausted at {state.current_location} "
                f"without reaching {end_location}"
            ),
            location=state.current_location,
        )

    def _start_instant(self, request: ScheduleRequest) -> datetime:
        """First departure as an aware UTC datetime."""
        if request.start_datetime is None:
            start = get_current_datetime_in_tz(request.timezone)
        else:
            start = localize(request.start_datetime, request.timezone)
        return start.astimezone(pytz.UTC)

    def _find_closing_route(
        self,
        catalog: RouteCatalog,
        state: GeneratorState,
        end_location: str,
        airline: str | None,
        rotation: RotationFilter,
        scorer: RouteScorer,
        remaining: int,
        turnaround: int,
    ) -> Route | None:
        """
        Best direct route to the end airport that still fits the budget.

        Rotation still applies: a widebody away from base can't close the
        schedule with a short hop.
        """
        direct = catalog.find_routes(state.current_location, end_location, airline)
        direct = rotation.filter_routes(direct, state.current_location, state.current_haul_type)
        fitting = [r for r in direct if r.duration_min + turnaround <= remaining]
        if not fitting:
            return None
        return scorer.rank(fitting)[0]

    def _fly(
        self, state: GeneratorState, route: Route, start_instant: datetime, turnaround: int
    ) -> None:
        """Append route as the next leg and advance time and position."""
        departure = start_instant + timedelta(minutes=state.elapsed_minutes)
        haul = classify_haul(route.duration_min)
        state.flights.append(
            GeneratedFlight(
                sequence=len(state.flights) + 1,
                route_id=route.route_id,
                departure_iata=route.departure_iata,
                arrival_iata=route.arrival_iata,
                airline_iata=route.airline_iata,
                departure_time=departure,
                arrival_time=departure + timedelta(minutes=route.duration_min),
                duration_min=route.duration_min,
                haul_type=haul,
            )
        )
        state.elapsed_minutes += route.duration_min + turnaround
        state.current_location = route.arrival_iata
        state.current_haul_type = haul

    def _result(
        self,
        status: GenerationStatus,
        state: GeneratorState | None,
        rotation: RotationFilter | None = None,
        message: str | None = None,
        location: str | None = None,
    ) -> ScheduleResult:
        failure = None
        if status != "success":
            failure = ScheduleFailure(
                kind=FAILURE_KINDS[status], message=message or status, location=location
            )
        return ScheduleResult(
            status=status,
            flights=list(state.flights) if state else [],
            failure=failure,
            policy=self.policy.name,
            total_minutes=state.elapsed_minutes if state else 0,
            excluded_routes=len(rotation.exclusions) if rotation else 0,
        )


def generate_schedule(
    request: ScheduleRequest,
    catalog: RouteCatalog,
    policy: SelectionPolicy | None = None,
) -> ScheduleResult:
    """
    Convenience function to generate a schedule.

    Args:
        request: ScheduleRequest with locations, budget and preferences
        catalog: Route source
        policy: Selection policy (defaults to score-ranked)

    Returns:
        ScheduleResult with the ordered flights or a typed failure
    """
    generator = ScheduleGenerator(policy)
    return generator.generate_schedule(request, catalog)

"""
Data structures for schedule generation.

Routes come from the catalog and are never modified. A ScheduleRequest is
built per generation call; the generator answers with a ScheduleResult that
carries the ordered flights and, when generation failed, a typed failure.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from .time_utils import format_iso

HaulType = Literal["short", "medium", "long"]

HAUL_TYPES: tuple[HaulType, ...] = ("short", "medium", "long")

# Single-bucket form of the haul preference, as offered by the schedule form
HaulBucket = Literal["short", "medium", "long", "any"]

# Which airport a schedule must finish at when no end_location is given
EndDefault = Literal["start_location", "home_base"]

FailureKind = Literal[
    "unknown_airport",  # start or end airport not in the catalog
    "no_routes_available",  # candidate pool empty, no continuity fallback
    "schedule_infeasible",  # budget exhausted or stranded away from the end
    "invalid_request",  # rejected before any search
]

GenerationStatus = Literal[
    "success",
    "exhausted",
    "infeasible",
    "no_routes",
    "unknown_airport",
    "invalid_request",
]

DEFAULT_MAX_LAYOVER_MIN = 240
TURNAROUND_MIN = 60  # Fixed ground time between legs


@dataclass(frozen=True)
class Route:
    """Single scheduled route from the catalog."""

    route_id: int
    departure_iata: str
    arrival_iata: str
    airline_iata: str
    duration_min: int
    distance_km: float | None = None

    def __post_init__(self) -> None:
        if self.duration_min <= 0:
            raise ValueError(f"Route {self.route_id} has non-positive duration")


@dataclass
class HaulPreferences:
    """
    Relative weighting of short, medium and long-haul legs.

    Weights are non-negative and need not sum to 100; they are normalized
    when a probability is needed.
    """

    short: float = 1.0
    medium: float = 1.0
    long: float = 1.0

    @classmethod
    def from_bucket(cls, bucket: HaulBucket) -> "HaulPreferences":
        """Build preferences from a single preferred bucket ("any" = equal weights)."""
        if bucket == "any":
            return cls(1.0, 1.0, 1.0)
        if bucket not in HAUL_TYPES:
            raise ValueError(f"Unknown haul preference: {bucket}")
        weights = {haul: 0.0 for haul in HAUL_TYPES}
        weights[bucket] = 1.0
        return cls(**weights)

    @property
    def total(self) -> float:
        return self.short + self.medium + self.long

    def weight_for(self, haul: HaulType) -> float:
        return getattr(self, haul)

    def probability_for(self, haul: HaulType) -> float:
        """Share of the total weight given to this haul type (0 when total is 0)."""
        if self.total <= 0:
            return 0.0
        return self.weight_for(haul) / self.total

    @property
    def dominant(self) -> HaulType | None:
        """Haul type with the unique highest weight, None on a tie."""
        weights = sorted(((self.weight_for(h), h) for h in HAUL_TYPES), reverse=True)
        if weights[0][0] <= 0 or weights[0][0] == weights[1][0]:
            return None
        return weights[0][1]


@dataclass
class ScheduleRequest:
    """Input from the schedule form."""

    start_location: str  # IATA code
    duration_days: int  # 1-30
    haul_preferences: HaulPreferences = field(default_factory=HaulPreferences)
    end_location: str | None = None  # Overrides end_default when set
    home_base: str | None = None  # Pilot's base; falls back to start_location
    end_default: EndDefault = "start_location"
    preferred_airline: str | None = None
    airline_only: bool = False  # True = restrict to preferred_airline, not just prefer it
    max_layover_minutes: int = DEFAULT_MAX_LAYOVER_MIN
    start_datetime: datetime | None = None  # First departure; defaults to now
    timezone: str = "UTC"  # IANA timezone for the default start instant

    @property
    def resolved_home_base(self) -> str:
        return self.home_base or self.start_location

    @property
    def resolved_end_location(self) -> str:
        """Airport the schedule has to finish at."""
        if self.end_location:
            return self.end_location
        if self.end_default == "home_base":
            return self.resolved_home_base
        return self.start_location

    @property
    def turnaround_minutes(self) -> int:
        return min(TURNAROUND_MIN, self.max_layover_minutes)

    @property
    def total_budget_minutes(self) -> int:
        return self.duration_days * 24 * 60


@dataclass
class GeneratedFlight:
    """One accepted leg of a generated schedule."""

    sequence: int  # 1-based position in the schedule
    route_id: int
    departure_iata: str
    arrival_iata: str
    airline_iata: str
    departure_time: datetime
    arrival_time: datetime  # departure_time + duration_min
    duration_min: int
    haul_type: HaulType

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "route_id": self.route_id,
            "departure_iata": self.departure_iata,
            "arrival_iata": self.arrival_iata,
            "airline_iata": self.airline_iata,
            "departure_time": format_iso(self.departure_time),
            "arrival_time": format_iso(self.arrival_time),
            "duration_min": self.duration_min,
            "haul_type": self.haul_type,
        }


@dataclass
class ScheduleFailure:
    """Why a schedule could not be generated."""

    kind: FailureKind
    message: str
    location: str | None = None  # Airport where the failure was detected


@dataclass
class ScheduleResult:
    """
    Output of one generation call.

    flights always holds the legs accepted so far; on failure that is the
    partial (possibly empty) sequence and failure describes what went wrong.
    """

    status: GenerationStatus
    flights: list[GeneratedFlight] = field(default_factory=list)
    failure: ScheduleFailure | None = None
    policy: str | None = None
    total_minutes: int = 0  # Sum of leg durations plus turnarounds
    excluded_routes: int = 0  # Candidates removed by the rotation filter

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "ok": self.ok,
            "policy": self.policy,
            "total_minutes": self.total_minutes,
            "excluded_routes": self.excluded_routes,
            "flights": [flight.to_dict() for flight in self.flights],
            "error": (
                {
                    "kind": self.failure.kind,
                    "message": self.failure.message,
                    "location": self.failure.location,
                }
                if self.failure
                else None
            ),
        }

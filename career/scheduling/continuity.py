"""
Aircraft rotation (continuity) filter.

A pilot who has just flown a long-haul leg is still on a widebody rotation.
Until the rotation brings them back to home base they can only be given
another long-haul leg. At home base every haul type is open again.

Records every excluded candidate for debugging.
"""

from dataclasses import dataclass

from ..haul import classify_haul
from ..types import HaulType, Route


@dataclass
class RotationExclusion:
    """Record of a candidate removed by the rotation rule."""

    route_id: int
    location: str
    haul_type: HaulType
    reason: str


class RotationFilter:
    """Apply the long-haul-away-from-base rule to candidate routes."""

    def __init__(self, home_base: str) -> None:
        self.home_base = home_base
        self.exclusions: list[RotationExclusion] = []

    def is_restricted(self, current_location: str, current_haul_type: HaulType | None) -> bool:
        """True when only long-haul legs may depart current_location."""
        return current_haul_type == "long" and current_location != self.home_base

    def filter_routes(
        self,
        routes: list[Route],
        current_location: str,
        current_haul_type: HaulType | None,
    ) -> list[Route]:
        """
        Drop candidates that would break the aircraft rotation.

        Args:
            routes: Candidates departing current_location
            current_location: Airport the pilot is at
            current_haul_type: Haul type of the last flown leg (None before the first)

        Returns:
            Candidates allowed from here, in their original order
        """
        if not self.is_restricted(current_location, current_haul_type):
            return list(routes)

        allowed = []
        for route in routes:
            haul = classify_haul(route.duration_min)
            if haul == "long":
                allowed.append(route)
            else:
                self.exclusions.append(
                    RotationExclusion(
                        route_id=route.route_id,
                        location=current_location,
                        haul_type=haul,
                        reason=f"On long-haul rotation away from {self.home_base}",
                    )
                )
        return allowed

    def get_detailed_exclusions(self) -> list[dict]:
        """Get detailed list of excluded candidates."""
        return [
            {
                "route_id": e.route_id,
                "location": e.location,
                "haul_type": e.haul_type,
                "reason": e.reason,
            }
            for e in self.exclusions
        ]

"""
Route scoring against stated preferences.

Scores are small integers:
- +2 when the route's haul type is the preferred (dominant) bucket
- +1 when the route is flown by the preferred airline

The same preferences also give each route a keep probability for the
weighted-random policy: the weight of its haul bucket over the total weight.
"""

from ..haul import classify_haul
from ..types import HaulPreferences, Route

HAUL_MATCH_SCORE = 2
AIRLINE_MATCH_SCORE = 1


class RouteScorer:
    """Score and rank candidate routes for one request's preferences."""

    def __init__(
        self, preferences: HaulPreferences, preferred_airline: str | None = None
    ) -> None:
        self.preferences = preferences
        self.preferred_airline = preferred_airline
        self._preferred_haul = preferences.dominant

    def score(self, route: Route) -> int:
        score = 0
        if self._preferred_haul and classify_haul(route.duration_min) == self._preferred_haul:
            score += HAUL_MATCH_SCORE
        if self.preferred_airline and route.airline_iata == self.preferred_airline:
            score += AIRLINE_MATCH_SCORE
        return score

    def keep_probability(self, route: Route) -> float:
        """Probability the weighted-random policy keeps this route in its pool."""
        return self.preferences.probability_for(classify_haul(route.duration_min))

    def rank(self, routes: list[Route]) -> list[Route]:
        """Routes by descending score; equal scores keep their input order."""
        return sorted(routes, key=self.score, reverse=True)


def score_route(
    route: Route, preferences: HaulPreferences, preferred_airline: str | None = None
) -> int:
    """Convenience wrapper around RouteScorer.score."""
    return RouteScorer(preferences, preferred_airline).score(route)

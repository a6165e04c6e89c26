"""
Leg selection layer.

Decides which route the generator flies next from a given airport.

Modules:
- scoring: Preference score and keep probability of a route
- continuity: Long-haul rotation rule away from home base
- selection: Weighted-random and score-ranked selection policies
"""

from .continuity import RotationFilter
from .scoring import RouteScorer
from .selection import ScoreRankedPolicy, SelectionPolicy, WeightedRandomPolicy, get_policy

__all__ = [
    "RouteScorer",
    "RotationFilter",
    "SelectionPolicy",
    "WeightedRandomPolicy",
    "ScoreRankedPolicy",
    "get_policy",
]

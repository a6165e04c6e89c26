"""
Selection policies.

A policy turns the candidate pool at one airport into an ordered list; the
generator flies the first route in it. Two policies share the same loop:

- weighted_random: keeps each candidate with its haul bucket's share of the
  preference weight, then picks uniformly among what was kept
- score_ranked: orders candidates by preference score, fully deterministic
"""

import random
from abc import ABC, abstractmethod
from typing import Literal

from ..types import Route
from .scoring import RouteScorer

PolicyName = Literal["weighted_random", "score_ranked"]


class SelectionPolicy(ABC):
    """Orders candidate routes; the first one is flown."""

    name: PolicyName

    @abstractmethod
    def rank(self, candidates: list[Route], scorer: RouteScorer) -> list[Route]:
        """Return candidates in preference order (never empty when candidates isn't)."""


class WeightedRandomPolicy(SelectionPolicy):
    """
    Probabilistic haul-mix selection.

    Each candidate is kept independently with probability
    weight(its bucket) / total weight. When nothing survives the draw the
    unfiltered candidates are used instead, so a run never ends just because
    the dice removed everything.
    """

    name: PolicyName = "weighted_random"

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def rank(self, candidates: list[Route], scorer: RouteScorer) -> list[Route]:
        pool = [r for r in candidates if self.rng.random() < scorer.keep_probability(r)]
        if not pool:
            pool = list(candidates)
        self.rng.shuffle(pool)
        return pool


class ScoreRankedPolicy(SelectionPolicy):
    """Highest preference score first; ties keep catalog order."""

    name: PolicyName = "score_ranked"

    def rank(self, candidates: list[Route], scorer: RouteScorer) -> list[Route]:
        return scorer.rank(candidates)


def get_policy(name: str, seed: int | None = None) -> SelectionPolicy:
    """
    Build a policy by name.

    Raises:
        ValueError: unknown policy name
    """
    if name == "weighted_random":
        return WeightedRandomPolicy(seed=seed)
    if name == "score_ranked":
        return ScoreRankedPolicy()
    raise ValueError(f"Unknown selection policy: {name}")

"""
Trend blending: fold population-level signals into the boosted score.

    trending     = Σ signal.contribution(posting, profile)
    final_score  = min(100, boosted_score + trending)

No lower clamp is needed: base scores are floored at 30 and boosts and
trend signals are non-negative with the default configuration.

Signals
-------
``TrendBlender`` sums a list of ``TrendSignal`` strategies. The default
(``simulated_trend_blender``) stands in for population data this system does
not have:

  PopularityNoiseSignal     uniform [0, 5) from an injected numpy Generator
  DepartmentAffinitySignal  +3 when posting and profile departments are equal
  IdRecencySignal           (posting_id / 100) mod 5

``IdRecencySignal`` assumes ids are issued in creation order. It is a
placeholder for a timestamp-based recency signal, not a real one.

``ExternalPopularitySignal`` reads a caller-supplied popularity mapping and
is the intended seam for a genuine multi-user source. Swapping signals never
touches the compatibility or boosting stages.

Randomness is never drawn from a process-wide source: pass a seeded
``numpy.random.Generator`` for reproducible rankings.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Sequence

import numpy as np

from opportunity_ranker.config import TrendConfig
from opportunity_ranker.models.posting import Posting, Profile
from opportunity_ranker.models.scored import ScoredPosting

logger = logging.getLogger(__name__)


class TrendSignal(ABC):
    """One additive component of the trend contribution.

    Subclasses implement ``contribution(posting, profile) -> float``.
    """

    name: str  # Override in subclass

    @abstractmethod
    def contribution(self, posting: Posting, profile: Profile) -> float:
        ...


class PopularityNoiseSignal(TrendSignal):
    """Ambient popularity noise: uniform draw in ``[0, scale)``."""

    name = "popularity_noise"

    def __init__(self, rng: np.random.Generator, scale: float = 5.0) -> None:
        self.rng = rng
        self.scale = scale

    def contribution(self, posting: Posting, profile: Profile) -> float:
        return float(self.rng.random()) * self.scale


class DepartmentAffinitySignal(TrendSignal):
    """Postings from the profile's own department trend among its peers."""

    name = "department_affinity"

    def __init__(self, bonus: float = 3.0) -> None:
        self.bonus = bonus

    def contribution(self, posting: Posting, profile: Profile) -> float:
        if posting.department and posting.department == profile.department:
            return self.bonus
        return 0.0


class IdRecencySignal(TrendSignal):
    """Recency proxy from identifier magnitude: ``(id / divisor) mod modulus``."""

    name = "id_recency"

    def __init__(self, divisor: float = 100.0, modulus: float = 5.0) -> None:
        self.divisor = divisor
        self.modulus = modulus

    def contribution(self, posting: Posting, profile: Profile) -> float:
        return (posting.posting_id / self.divisor) % self.modulus


class ExternalPopularitySignal(TrendSignal):
    """Popularity supplied by an outside feed, keyed by posting id.

    Postings absent from ``scores`` contribute 0.
    """

    name = "external_popularity"

    def __init__(self, scores: Mapping[int, float], weight: float = 1.0) -> None:
        self.scores = dict(scores)
        self.weight = weight

    def contribution(self, posting: Posting, profile: Profile) -> float:
        return self.scores.get(posting.posting_id, 0.0) * self.weight


class TrendBlender:
    """Sum trend signals into each boosted posting and cap the final score.

    Attributes:
        signals:   Signals applied in order (order matters only for the noise
                   draw sequence).
        final_cap: Upper bound on ``final_score``.
    """

    def __init__(self, signals: Sequence[TrendSignal], final_cap: float = 100.0) -> None:
        self.signals = list(signals)
        self.final_cap = final_cap

    def blend(
        self,
        boosted: Sequence[ScoredPosting],
        profile: Profile,
    ) -> list[ScoredPosting]:
        """Add ``trending`` and ``final_score`` to every boosted posting.

        Args:
            boosted: Output of the interaction-boost stage.
            profile: The profile being ranked for.

        Returns:
            New ScoredPosting list, same order and length as ``boosted``.

        Raises:
            ValueError: If a posting has not been through the boost stage.
        """
        blended: list[ScoredPosting] = []
        for sp in boosted:
            if sp.boosted_score is None:
                raise ValueError(
                    f"Posting {sp.posting.posting_id} reached the trend stage unboosted."
                )
            trending = sum(s.contribution(sp.posting, profile) for s in self.signals)
            final_score = min(self.final_cap, sp.boosted_score + trending)
            blended.append(sp.with_trend(trending, final_score))
        return blended


def simulated_trend_blender(
    rng: np.random.Generator,
    config: TrendConfig | None = None,
) -> TrendBlender:
    """Build the default noise + department + id-recency blender.

    Args:
        rng:    Generator for the popularity noise.
        config: Signal parameters. Defaults to ``TrendConfig()``.
    """
    cfg = config or TrendConfig()
    return TrendBlender(
        signals=[
            PopularityNoiseSignal(rng, scale=cfg.noise_scale),
            DepartmentAffinitySignal(bonus=cfg.department_bonus),
            IdRecencySignal(divisor=cfg.recency_divisor, modulus=cfg.recency_modulus),
        ],
        final_cap=cfg.final_cap,
    )

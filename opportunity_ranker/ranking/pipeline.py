"""
RecommendationPipeline — rank a posting catalog for one profile.

Ranking flow
------------
  1. compatibility.score_breakdown()      -> base_score per posting
  2. booster.apply_interaction_boost()    -> interaction_boost, boosted_score
  3. TrendBlender.blend()                 -> trending, final_score
  4. stable sort by final_score descending (ties keep catalog order)

Each stage consumes only the previous stage's output. Inputs are never
mutated; every pass allocates its own ScoredPosting list.

Usage::

    pipeline = RecommendationPipeline(config=app_config, seed=42)
    ranked = pipeline.recommend(postings, profile, interactions)
    for sp in ranked:
        print(sp.posting.title, sp.match_score, sp.recommendation_score)

A pipeline owns its random generator. Use one instance per thread when
ranking concurrently.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from opportunity_ranker.config import AppConfig
from opportunity_ranker.models.interaction import Interaction
from opportunity_ranker.models.posting import Posting, Profile
from opportunity_ranker.models.scored import ScoredPosting
from opportunity_ranker.ranking.booster import apply_interaction_boost
from opportunity_ranker.ranking.compatibility import score_breakdown
from opportunity_ranker.ranking.trend import TrendBlender, simulated_trend_blender

logger = logging.getLogger(__name__)


class RecommendationPipeline:
    """Compatibility -> interaction boost -> trend blend -> sort.

    Attributes:
        config:  Application configuration (scoring, boost and trend sections).
        blender: Trend stage. Defaults to ``simulated_trend_blender`` seeded
                 from ``seed``, then ``config.trend.seed``.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        blender: TrendBlender | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or AppConfig()
        if blender is None:
            if rng is None:
                rng = np.random.default_rng(
                    seed if seed is not None else self.config.trend.seed
                )
            blender = simulated_trend_blender(rng, self.config.trend)
        self.blender = blender

    def score(
        self,
        postings: Sequence[Posting],
        profile: Profile,
    ) -> list[ScoredPosting]:
        """Stage 1: compatibility score for every posting, in catalog order."""
        weights = self.config.scoring
        scored: list[ScoredPosting] = []
        for posting in postings:
            breakdown = score_breakdown(posting, profile, weights)
            scored.append(
                ScoredPosting(
                    posting=posting,
                    base_score=breakdown.score,
                    breakdown=breakdown,
                )
            )
        return scored

    def recommend(
        self,
        postings: Sequence[Posting] | None,
        profile: Profile | None,
        interactions: Iterable[Interaction] | None = None,
    ) -> list[ScoredPosting]:
        """Rank ``postings`` for ``profile``.

        Args:
            postings:     Catalog to rank. ``None`` or empty returns ``[]``.
            profile:      Profile to rank for. ``None`` returns ``[]``.
            interactions: The profile's interaction log (optional).

        Returns:
            ScoredPosting list sorted by ``final_score`` descending. Postings
            with equal final scores keep their catalog order.
        """
        if not postings or profile is None:
            return []

        log = list(interactions or ())

        scored = self.score(postings, profile)
        boosted = apply_interaction_boost(scored, log, self.config.boost)
        blended = self.blender.blend(boosted, profile)

        ranked = sorted(blended, key=lambda sp: -sp.final_score)

        logger.info(
            "Ranked %d posting(s) for profile=%s using %d interaction(s).",
            len(ranked), profile.profile_id, len(log),
        )
        if ranked:
            top = ranked[0]
            logger.debug(
                "Top posting: id=%s title=%r match=%d final=%.2f",
                top.posting.posting_id, top.posting.title,
                top.match_score, top.final_score,
            )
        return ranked


def recommend(
    postings: Sequence[Posting] | None,
    profile: Profile | None,
    interactions: Iterable[Interaction] | None = None,
    seed: int | None = None,
    config: AppConfig | None = None,
) -> list[ScoredPosting]:
    """One-shot convenience wrapper around ``RecommendationPipeline``."""
    return RecommendationPipeline(config=config, seed=seed).recommend(
        postings, profile, interactions
    )

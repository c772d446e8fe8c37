"""
Derived ranking records.

``MatchBreakdown`` is the per-criterion detail behind a compatibility score.
``ScoredPosting`` wraps a ``Posting`` with the score progression produced by
the ranking pipeline:

    base_score  ->  interaction_boost, boosted_score  ->  trending, final_score

Each pipeline stage returns new ``ScoredPosting`` instances that add its own
fields; fields written by an earlier stage are never changed. Both classes
are frozen dataclasses (pipeline-internal, never persisted directly).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from opportunity_ranker.models.posting import Posting


@dataclass(frozen=True)
class MatchBreakdown:
    """Per-criterion contributions to a compatibility score.

    A criterion attribute is ``None`` when the criterion was skipped because
    its inputs were missing on either side; skipped criteria count toward
    neither ``achieved`` nor ``max_possible``.

    Attributes:
        skills_points:     Points earned for skills overlap, or ``None``.
        department_points: Points earned for department match, or ``None``.
        experience_points: Points earned for experience level, or ``None``.
        interest_points:   Points earned for interest/category match, or ``None``.
        skills_matched:    Required skills matched by the profile.
        skills_required:   Required skills on the posting.
        achieved:          Sum of earned points.
        max_possible:      Sum of weights of the applicable criteria.
        score:             Final clamped integer score.
    """

    skills_points:     float | None
    department_points: float | None
    experience_points: float | None
    interest_points:   float | None
    skills_matched:    int
    skills_required:   int
    achieved:          float
    max_possible:      float
    score:             int

    @property
    def ratio(self) -> float | None:
        """achieved / max_possible, or ``None`` when no criterion applied."""
        if self.max_possible <= 0:
            return None
        return self.achieved / self.max_possible


@dataclass(frozen=True)
class ScoredPosting:
    """A posting moving through the ranking pipeline.

    Attributes:
        posting:           The underlying Posting.
        base_score:        Compatibility score in [30, 100].
        breakdown:         Detail behind ``base_score`` (None for the
                           missing-input sentinel).
        interaction_boost: Total boost from the interaction log.
        boosted_score:     base_score + interaction_boost (may exceed 100).
        trending:          Summed trend-signal contribution.
        final_score:       min(100, boosted_score + trending).
    """

    posting:           Posting
    base_score:        int
    breakdown:         MatchBreakdown | None = None
    interaction_boost: float | None = None
    boosted_score:     float | None = None
    trending:          float | None = None
    final_score:       float | None = None

    @property
    def match_score(self) -> int:
        return self.base_score

    @property
    def recommendation_score(self) -> float | None:
        return self.final_score

    def with_boost(self, interaction_boost: float) -> ScoredPosting:
        """Return a copy carrying the interaction-boost stage output."""
        if self.boosted_score is not None:
            raise ValueError(
                f"Posting {self.posting.posting_id} has already been boosted."
            )
        return replace(
            self,
            interaction_boost=interaction_boost,
            boosted_score=self.base_score + interaction_boost,
        )

    def with_trend(self, trending: float, final_score: float) -> ScoredPosting:
        """Return a copy carrying the trend-blend stage output."""
        if self.final_score is not None:
            raise ValueError(
                f"Posting {self.posting.posting_id} has already been blended."
            )
        return replace(self, trending=trending, final_score=final_score)

    def to_record(self) -> dict[str, Any]:
        """Flat dict: the posting's fields plus every score field.

        Suitable for JSON/CSV export; ``skills`` becomes a list.
        """
        record: dict[str, Any] = self.posting.model_dump(mode="json")
        record.update(
            {
                "match_score":          self.match_score,
                "interaction_boost":    self.interaction_boost,
                "boosted_score":        self.boosted_score,
                "trending":             _round_or_none(self.trending),
                "recommendation_score": _round_or_none(self.recommendation_score),
            }
        )
        return record


def _round_or_none(value: float | None, digits: int = 2) -> float | None:
    return None if value is None else round(value, digits)

"""Tests for ScoredPosting and MatchBreakdown."""

from __future__ import annotations

import dataclasses

import pytest

from opportunity_ranker.models.scored import MatchBreakdown, ScoredPosting


@pytest.fixture
def scored(design_posting) -> ScoredPosting:
    return ScoredPosting(posting=design_posting, base_score=64)


class TestScoredPostingProgression:
    def test_with_boost_adds_fields(self, scored):
        boosted = scored.with_boost(7)
        assert boosted.interaction_boost == 7
        assert boosted.boosted_score == 71
        assert boosted.base_score == 64

    def test_with_boost_leaves_original(self, scored):
        scored.with_boost(7)
        assert scored.boosted_score is None

    def test_double_boost_raises(self, scored):
        with pytest.raises(ValueError, match="already been boosted"):
            scored.with_boost(1).with_boost(1)

    def test_with_trend_adds_fields(self, scored):
        final = scored.with_boost(0).with_trend(2.5, 66.5)
        assert final.trending == pytest.approx(2.5)
        assert final.final_score == pytest.approx(66.5)
        assert final.recommendation_score == pytest.approx(66.5)
        assert final.match_score == 64

    def test_double_trend_raises(self, scored):
        blended = scored.with_boost(0).with_trend(1.0, 65.0)
        with pytest.raises(ValueError, match="already been blended"):
            blended.with_trend(1.0, 65.0)

    def test_frozen(self, scored):
        with pytest.raises(dataclasses.FrozenInstanceError):
            scored.base_score = 99  # type: ignore[misc]


class TestToRecord:
    def test_record_carries_posting_and_scores(self, scored):
        record = scored.with_boost(3).with_trend(1.234, 68.234).to_record()
        assert record["posting_id"] == 1
        assert record["title"] == "UI/UX Designer for Campus App"
        assert record["skills"] == ["React", "Figma"]
        assert record["match_score"] == 64
        assert record["boosted_score"] == 67
        assert record["trending"] == 1.23
        assert record["recommendation_score"] == 68.23

    def test_unfinished_record_has_none_scores(self, scored):
        record = scored.to_record()
        assert record["recommendation_score"] is None
        assert record["interaction_boost"] is None


class TestMatchBreakdown:
    def test_ratio(self):
        b = MatchBreakdown(
            skills_points=25.0, department_points=20.0,
            experience_points=None, interest_points=None,
            skills_matched=1, skills_required=2,
            achieved=45.0, max_possible=70.0, score=64,
        )
        assert b.ratio == pytest.approx(45 / 70)

    def test_ratio_none_without_criteria(self):
        b = MatchBreakdown(
            skills_points=None, department_points=None,
            experience_points=None, interest_points=None,
            skills_matched=0, skills_required=0,
            achieved=0.0, max_possible=0.0, score=50,
        )
        assert b.ratio is None

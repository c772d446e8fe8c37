"""
Tests for opportunity_ranker/ranking/trend.py.

What we test
------------
Signals:
  - PopularityNoiseSignal draws in [0, scale) and is reproducible per seed.
  - DepartmentAffinitySignal: bonus only when both departments are present
    and equal.
  - IdRecencySignal: (id / 100) mod 5.
  - ExternalPopularitySignal: reads the supplied mapping, 0 when absent.

TrendBlender.blend():
  - trending is the sum of signal contributions.
  - final_score = min(100, boosted + trending), never above 100.
  - Unboosted input raises ValueError.
  - Earlier-stage fields are carried through unchanged.

simulated_trend_blender():
  - Wires noise + department + recency from TrendConfig.
"""

from __future__ import annotations

import numpy as np
import pytest

from opportunity_ranker.config import TrendConfig
from opportunity_ranker.models.posting import Posting, Profile
from opportunity_ranker.models.scored import ScoredPosting
from opportunity_ranker.ranking.trend import (
    DepartmentAffinitySignal,
    ExternalPopularitySignal,
    IdRecencySignal,
    PopularityNoiseSignal,
    TrendBlender,
    TrendSignal,
    simulated_trend_blender,
)


# ── Helpers ────────────────────────────────────────────────────────────────────

class _ConstantSignal(TrendSignal):
    name = "constant"

    def __init__(self, value: float) -> None:
        self.value = value

    def contribution(self, posting: Posting, profile: Profile) -> float:
        return self.value


def _posting(posting_id: int = 1, department: str | None = None) -> Posting:
    return Posting(posting_id=posting_id, title="p", department=department)


def _boosted(boosted_score: float, posting_id: int = 1) -> ScoredPosting:
    sp = ScoredPosting(posting=_posting(posting_id), base_score=50)
    return sp.with_boost(boosted_score - 50)


@pytest.fixture
def profile() -> Profile:
    return Profile(profile_id="u", department="Computer Science")


# ── Signals ───────────────────────────────────────────────────────────────────

class TestPopularityNoise:
    def test_draws_within_range(self, profile):
        signal = PopularityNoiseSignal(np.random.default_rng(0), scale=5.0)
        draws = [signal.contribution(_posting(), profile) for _ in range(200)]
        assert all(0.0 <= d < 5.0 for d in draws)

    def test_same_seed_reproduces(self, profile):
        a = PopularityNoiseSignal(np.random.default_rng(42))
        b = PopularityNoiseSignal(np.random.default_rng(42))
        assert [a.contribution(_posting(), profile) for _ in range(5)] == [
            b.contribution(_posting(), profile) for _ in range(5)
        ]

    def test_zero_scale_is_silent(self, profile):
        signal = PopularityNoiseSignal(np.random.default_rng(1), scale=0.0)
        assert signal.contribution(_posting(), profile) == 0.0


class TestDepartmentAffinity:
    def test_same_department(self, profile):
        signal = DepartmentAffinitySignal()
        assert signal.contribution(_posting(department="Computer Science"), profile) == 3.0

    def test_different_department(self, profile):
        signal = DepartmentAffinitySignal()
        assert signal.contribution(_posting(department="Marketing"), profile) == 0.0

    def test_both_missing_earns_nothing(self):
        signal = DepartmentAffinitySignal()
        assert signal.contribution(_posting(), Profile(profile_id="u")) == 0.0


class TestIdRecency:
    @pytest.mark.parametrize(
        "posting_id, expected",
        [(1, 0.01), (250, 2.5), (499, 4.99), (500, 0.0), (700, 2.0)],
    )
    def test_formula(self, posting_id, expected, profile):
        signal = IdRecencySignal()
        assert signal.contribution(_posting(posting_id), profile) == pytest.approx(expected)


class TestExternalPopularity:
    def test_reads_mapping_with_weight(self, profile):
        signal = ExternalPopularitySignal({1: 4.0}, weight=0.5)
        assert signal.contribution(_posting(1), profile) == pytest.approx(2.0)

    def test_missing_posting_is_zero(self, profile):
        signal = ExternalPopularitySignal({1: 4.0})
        assert signal.contribution(_posting(2), profile) == 0.0


# ── TrendBlender ──────────────────────────────────────────────────────────────

class TestTrendBlender:
    def test_trending_is_sum_of_signals(self, profile):
        blender = TrendBlender([_ConstantSignal(1.5), _ConstantSignal(2.0)])
        result = blender.blend([_boosted(60)], profile)
        assert result[0].trending == pytest.approx(3.5)
        assert result[0].final_score == pytest.approx(63.5)

    def test_final_score_capped_at_100(self, profile):
        blender = TrendBlender([_ConstantSignal(3.0)])
        result = blender.blend([_boosted(99), _boosted(250)], profile)
        assert [sp.final_score for sp in result] == [100.0, 100.0]

    def test_no_signals_passes_boosted_through(self, profile):
        result = TrendBlender([]).blend([_boosted(72)], profile)
        assert result[0].trending == 0
        assert result[0].final_score == pytest.approx(72.0)

    def test_unboosted_input_raises(self, profile):
        raw = ScoredPosting(posting=_posting(), base_score=50)
        with pytest.raises(ValueError, match="unboosted"):
            TrendBlender([]).blend([raw], profile)

    def test_earlier_fields_carried_through(self, profile):
        boosted = _boosted(58)
        result = TrendBlender([_ConstantSignal(1.0)]).blend([boosted], profile)
        assert result[0].base_score == 50
        assert result[0].interaction_boost == pytest.approx(8.0)
        assert result[0].boosted_score == pytest.approx(58.0)

    def test_final_never_exceeds_100_with_noise(self, profile):
        blender = simulated_trend_blender(np.random.default_rng(3))
        batch = [_boosted(98.0 + i, posting_id=i * 37) for i in range(20)]
        assert all(sp.final_score <= 100.0 for sp in blender.blend(batch, profile))


# ── simulated_trend_blender ───────────────────────────────────────────────────

class TestSimulatedTrendBlender:
    def test_signal_order(self):
        blender = simulated_trend_blender(np.random.default_rng(0))
        assert [s.name for s in blender.signals] == [
            "popularity_noise", "department_affinity", "id_recency",
        ]

    def test_deterministic_without_noise(self, profile):
        blender = simulated_trend_blender(
            np.random.default_rng(0), TrendConfig(noise_scale=0.0)
        )
        sp = ScoredPosting(
            posting=_posting(250, department="Computer Science"), base_score=50
        ).with_boost(0)
        result = blender.blend([sp], profile)
        # department 3 + recency 2.5
        assert result[0].trending == pytest.approx(5.5)
        assert result[0].final_score == pytest.approx(55.5)

    def test_noise_bounded_by_config(self, profile):
        blender = simulated_trend_blender(
            np.random.default_rng(9), TrendConfig(noise_scale=5.0)
        )
        batch = [_boosted(50, posting_id=500) for _ in range(50)]
        # id 500 -> recency 0, no department -> trending is pure noise
        assert all(0.0 <= sp.trending < 5.0 for sp in blender.blend(batch, profile))

"""
Compatibility scoring: one posting against one profile -> integer 30–100.

Score formula (weighted share of applicable criteria)
------------------------------------------------------
    score = round(achieved / max_possible × 100)      clamped to [30, 100]

Each criterion adds its weight to ``max_possible`` only when its inputs are
present on BOTH sides (non-blank string, non-empty collection). Missing data
is not evidence of mismatch, so skipped criteria never penalise.

Criteria
--------
skills (50):
    A required skill is matched when any profile skill is a case-insensitive
    substring of it or vice versa ("React" matches "React.js"; "Vue" does not
    match "React"). Earns weight × matched / required.

department (20):
    Full weight on case-insensitive equality, else 0.

experience (15):
    Same level on the ordered scale: full weight. One step apart: half.
    Anything else, including labels not on the scale: 0.

interest (15):
    Full weight when the posting category and any profile interest contain
    one another (case-insensitive), else 0.

Special cases
-------------
- posting or profile is ``None``         -> 30 (weak-match sentinel)
- no criterion applicable (max == 0)     -> 50 (indeterminate, neutral)
- computed score below 30                -> 30 (hard floor)

Rounding is half-up, so 64.5 becomes 65 rather than Python's banker's 64.
The ratio is taken before scaling by 100; 57.5 / 100 scales to 57.4999...
in floating point and rounds to 57.

Pure functions, no I/O, no logging.
"""

from __future__ import annotations

import math
from typing import Iterable

from opportunity_ranker.config import ScoringConfig
from opportunity_ranker.models.posting import Posting, Profile
from opportunity_ranker.models.scored import MatchBreakdown
from opportunity_ranker.taxonomy.experience import experience_distance

_DEFAULT_WEIGHTS = ScoringConfig()


def compute_match_score(
    posting: Posting | None,
    profile: Profile | None,
    weights: ScoringConfig | None = None,
) -> int:
    """Return the compatibility score of ``posting`` for ``profile``.

    Args:
        posting: Posting to score; ``None`` yields the floor.
        profile: Profile to score against; ``None`` yields the floor.
        weights: Criterion weights and bounds. Defaults to ``ScoringConfig()``.

    Returns:
        Integer in ``[weights.floor, weights.ceiling]`` (30–100 by default).
    """
    w = weights or _DEFAULT_WEIGHTS
    if posting is None or profile is None:
        return w.floor
    return score_breakdown(posting, profile, w).score


def score_breakdown(
    posting: Posting,
    profile: Profile,
    weights: ScoringConfig | None = None,
) -> MatchBreakdown:
    """Compute every criterion contribution and the resulting score.

    Args:
        posting: Posting to score.
        profile: Profile to score against.
        weights: Criterion weights and bounds. Defaults to ``ScoringConfig()``.

    Returns:
        MatchBreakdown with ``score`` populated.
    """
    w = weights or _DEFAULT_WEIGHTS
    achieved = 0.0
    max_possible = 0.0

    # ── Skills overlap ────────────────────────────────────────────────────────
    skills_points: float | None = None
    required = len(posting.skills)
    matched = 0
    if posting.skills and profile.skills:
        profile_skills = [s.lower() for s in profile.skills]
        matched = sum(
            1 for skill in posting.skills
            if _contains_either_way(skill.lower(), profile_skills)
        )
        skills_points = w.skills_weight * matched / required
        achieved += skills_points
        max_possible += w.skills_weight

    # ── Department ────────────────────────────────────────────────────────────
    department_points: float | None = None
    post_dept = _norm(posting.department)
    prof_dept = _norm(profile.department)
    if post_dept and prof_dept:
        department_points = w.department_weight if post_dept == prof_dept else 0.0
        achieved += department_points
        max_possible += w.department_weight

    # ── Experience level ──────────────────────────────────────────────────────
    experience_points: float | None = None
    if _norm(posting.experience_level) and _norm(profile.experience_level):
        distance = experience_distance(posting.experience_level, profile.experience_level)
        if distance == 0:
            experience_points = w.experience_weight
        elif distance == 1:
            experience_points = w.experience_weight * 0.5
        else:
            experience_points = 0.0
        achieved += experience_points
        max_possible += w.experience_weight

    # ── Interest / category ───────────────────────────────────────────────────
    interest_points: float | None = None
    category = _norm(posting.category)
    if category and profile.interests:
        hit = _contains_either_way(category, [i.lower() for i in profile.interests])
        interest_points = w.interest_weight if hit else 0.0
        achieved += interest_points
        max_possible += w.interest_weight

    if max_possible > 0:
        raw_score = _round_half_up(achieved / max_possible * 100.0)
    else:
        raw_score = w.neutral_score

    return MatchBreakdown(
        skills_points=skills_points,
        department_points=department_points,
        experience_points=experience_points,
        interest_points=interest_points,
        skills_matched=matched,
        skills_required=required,
        achieved=achieved,
        max_possible=max_possible,
        score=_clamp(raw_score, w.floor, w.ceiling),
    )


def build_match_reasons(
    breakdown: MatchBreakdown,
    weights: ScoringConfig | None = None,
) -> list[str]:
    """Explain a breakdown as short human-readable reasons.

    One reason per applicable criterion, in criterion order. When no
    criterion applied, a single "not enough data" reason is returned.
    """
    w = weights or _DEFAULT_WEIGHTS
    reasons: list[str] = []

    if breakdown.skills_points is not None:
        reasons.append(
            f"{breakdown.skills_matched}/{breakdown.skills_required} required skills matched"
        )

    if breakdown.department_points is not None:
        reasons.append(
            "Same department" if breakdown.department_points > 0 else "Different department"
        )

    if breakdown.experience_points is not None:
        if w.experience_weight > 0 and breakdown.experience_points >= w.experience_weight:
            reasons.append("Experience level matches")
        elif breakdown.experience_points > 0:
            reasons.append("Experience level is one step away")
        else:
            reasons.append("Experience level does not match")

    if breakdown.interest_points is not None:
        reasons.append(
            "Category matches your interests"
            if breakdown.interest_points > 0
            else "Category outside your interests"
        )

    if not reasons:
        reasons.append("Not enough profile data to judge fit")
    return reasons


# ── Internal helpers ──────────────────────────────────────────────────────────

def _contains_either_way(needle: str, haystack: Iterable[str]) -> bool:
    """True if ``needle`` and any entry of ``haystack`` contain one another."""
    return any(needle in other or other in needle for other in haystack)


def _norm(value: str | None) -> str:
    return (value or "").strip().lower()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))

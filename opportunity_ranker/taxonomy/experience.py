"""
Experience-level scale shared by postings and profiles.

The scale is ordered: ``beginner < intermediate < advanced < expert``.
Compatibility scoring uses the distance between two levels on this scale:

  distance 0  -> full experience credit
  distance 1  -> half credit (adjacent levels)
  otherwise   -> no credit

Labels that are not on the scale have no position and never earn credit.

This module has NO imports from any other ``opportunity_ranker`` package.
"""

from enum import StrEnum


class ExperienceLevel(StrEnum):
    """Ordered experience scale. Declaration order is the scale order."""

    BEGINNER = "beginner"
    """New to the field; coursework-level exposure."""

    INTERMEDIATE = "intermediate"
    """Has shipped at least one project or held a related role."""

    ADVANCED = "advanced"
    """Works independently; can lead a sub-area."""

    EXPERT = "expert"
    """Recognised depth; mentors others."""


EXPERIENCE_SCALE: tuple[ExperienceLevel, ...] = tuple(ExperienceLevel)


def experience_rank(label: str | None) -> int | None:
    """Return the 0-based position of ``label`` on the scale, or ``None``.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if not label:
        return None
    try:
        return EXPERIENCE_SCALE.index(ExperienceLevel(label.strip().lower()))
    except ValueError:
        return None


def experience_distance(a: str | None, b: str | None) -> int | None:
    """Absolute scale distance between two labels; ``None`` if either is off-scale."""
    rank_a = experience_rank(a)
    rank_b = experience_rank(b)
    if rank_a is None or rank_b is None:
        return None
    return abs(rank_a - rank_b)

"""
Shared pytest fixtures for the Opportunity Ranker test suite.

Provides:
  - Sample domain object factories (postings, profiles, interactions).
  - ``app_config``: default ``AppConfig`` with no file or env involvement.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from opportunity_ranker.config import AppConfig
from opportunity_ranker.models.interaction import Interaction
from opportunity_ranker.models.posting import Posting, Profile


# ── Config fixture ────────────────────────────────────────────────────────────

@pytest.fixture
def app_config() -> AppConfig:
    """All-defaults ``AppConfig``."""
    return AppConfig()


# ── Sample domain object factories ────────────────────────────────────────────

@pytest.fixture
def cs_profile() -> Profile:
    """React/Python student in Computer Science with no interests or level."""
    return Profile(
        profile_id="user123",
        name="Student User",
        department="Computer Science",
        skills=("React", "Python"),
    )


@pytest.fixture
def design_posting() -> Posting:
    """Academic project requiring React and Figma in Computer Science."""
    return Posting(
        posting_id=1,
        title="UI/UX Designer for Campus App",
        category="Academic Project",
        department="Computer Science",
        skills=("React", "Figma"),
    )


@pytest.fixture
def catalog() -> list[Posting]:
    """Three postings across two categories with overlapping skills."""
    return [
        Posting(
            posting_id=100,
            title="Frontend Developer",
            category="Academic Project",
            department="Computer Science",
            skills=("React", "TypeScript"),
        ),
        Posting(
            posting_id=200,
            title="Data Analyst",
            category="Academic Project",
            department="Statistics",
            skills=("Python", "SQL"),
        ),
        Posting(
            posting_id=300,
            title="Event Volunteer",
            category="Part-time Job",
            department="Marketing",
            skills=("Communication",),
        ),
    ]


@pytest.fixture
def fixed_ts() -> datetime:
    return datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_interaction(fixed_ts):
    """Factory: ``make_interaction(posting_id, kind)``."""
    def _make(posting_id: int, kind: str, profile_id: str = "user123") -> Interaction:
        return Interaction(
            profile_id=profile_id,
            posting_id=posting_id,
            kind=kind,
            timestamp=fixed_ts,
        )
    return _make

"""
Mock catalog, profile and interaction log for demos.

``sample_postings()`` returns the five postings shown on the seeker
dashboard; ``generate_mock_profile()`` the demo student; and
``generate_mock_interactions()`` draws a random interaction log over a
catalog. All randomness comes from the caller's ``numpy.random.Generator``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

import numpy as np

from opportunity_ranker.models.interaction import Interaction
from opportunity_ranker.models.posting import Posting, Profile
from opportunity_ranker.taxonomy.interaction_taxonomy import InteractionKind

# Kinds a mock log draws from; similar_view is produced by the UI, not users.
_MOCK_KINDS: tuple[InteractionKind, ...] = (
    InteractionKind.VIEW,
    InteractionKind.BOOKMARK,
    InteractionKind.APPLICATION,
)


def sample_postings() -> list[Posting]:
    """The demo catalog."""
    return [
        Posting(
            posting_id=1,
            title="UI/UX Designer for Campus App",
            category="Academic Project",
            posted_by="Prof. Johnson",
            department="Computer Science",
            skills=("UI Design", "Figma", "User Research"),
        ),
        Posting(
            posting_id=2,
            title="Backend Developer for Hackathon",
            category="Competition/Hackathon",
            posted_by="Tech Club",
            department="Engineering",
            skills=("Node.js", "MongoDB", "Express"),
        ),
        Posting(
            posting_id=3,
            title="Marketing Assistant for Student Startup",
            category="Startup/Collaboration",
            posted_by="EcoTech Startup",
            department="Business School",
            skills=("Social Media", "Content Creation", "Analytics"),
        ),
        Posting(
            posting_id=4,
            title="Research Assistant - AI Project",
            category="Academic Project",
            posted_by="Dr. Smith",
            department="Computer Science",
            skills=("Python", "Machine Learning", "Data Analysis"),
        ),
        Posting(
            posting_id=5,
            title="Campus Ambassador",
            category="Part-time Job",
            posted_by="TechCorp",
            department="Marketing",
            skills=("Communication", "Event Management", "Leadership"),
        ),
    ]


def generate_mock_profile() -> Profile:
    """The demo student profile."""
    return Profile(
        profile_id="user123",
        name="Student User",
        department="Computer Science",
        skills=("React", "JavaScript", "UI Design", "Node.js", "Python"),
        experience_level="intermediate",
        interests=("Academic Project", "Hackathon", "Startup"),
    )


def generate_mock_interactions(
    profile_id: str,
    postings: Sequence[Posting],
    rng: np.random.Generator,
    probability: float = 0.4,
    timestamp: datetime | None = None,
) -> list[Interaction]:
    """Draw a random interaction log over ``postings``.

    Each posting independently receives one interaction with ``probability``;
    its kind is drawn uniformly from view / bookmark / application.

    Args:
        profile_id:  Subject of every generated interaction.
        postings:    Catalog to interact with.
        rng:         Source of randomness.
        probability: Per-posting chance of an interaction, in [0, 1].
        timestamp:   Timestamp stamped on every record. Defaults to now (UTC).

    Returns:
        Interactions in catalog order; empty for an empty catalog.

    Raises:
        ValueError: If ``probability`` is outside [0, 1].
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must be in [0, 1], got {probability}.")

    ts = timestamp or datetime.now(tz=timezone.utc)
    interactions: list[Interaction] = []
    for posting in postings:
        if rng.random() < probability:
            kind = _MOCK_KINDS[int(rng.integers(len(_MOCK_KINDS)))]
            interactions.append(
                Interaction(
                    profile_id=profile_id,
                    posting_id=posting.posting_id,
                    kind=kind,
                    timestamp=ts,
                )
            )
    return interactions

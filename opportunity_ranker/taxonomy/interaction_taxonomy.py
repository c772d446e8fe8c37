"""
Interaction kinds recorded in a profile's behaviour log.

``InteractionKind`` enumerates the kinds the ranking pipeline understands.
Interaction records may still carry other kind strings (new UI events are
logged before the ranker learns about them); such kinds are accepted and
simply earn no boost.

``APPLICATION`` is special: an application signals commitment rather than
browsing interest, so it never feeds interest inference.

This module has NO imports from any other ``opportunity_ranker`` package.
"""

from enum import StrEnum


class InteractionKind(StrEnum):
    """Known interaction kinds."""

    VIEW = "view"
    """Profile opened the posting detail page."""

    BOOKMARK = "bookmark"
    """Profile saved the posting for later."""

    APPLICATION = "application"
    """Profile applied to the posting."""

    SIMILAR_VIEW = "similar_view"
    """Profile viewed a posting surfaced as similar to this one."""


KNOWN_KINDS: frozenset[str] = frozenset(k.value for k in InteractionKind)

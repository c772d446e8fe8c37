"""
Catalog filters applied after ranking (search box, category dropdown, top-N).

Every function accepts either ``Posting`` or ``ScoredPosting`` items and
preserves input order, so filtering a ranked list keeps it ranked.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from opportunity_ranker.models.posting import Posting
from opportunity_ranker.models.scored import ScoredPosting

T = TypeVar("T", Posting, ScoredPosting)


def _posting_of(item: Posting | ScoredPosting) -> Posting:
    return item.posting if isinstance(item, ScoredPosting) else item


def search_postings(items: Sequence[T], term: str | None) -> list[T]:
    """Keep items whose title or any skill contains ``term`` (case-insensitive).

    A ``None`` or blank term keeps everything.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(items)
    result: list[T] = []
    for item in items:
        posting = _posting_of(item)
        if needle in posting.title.lower() or any(
            needle in skill.lower() for skill in posting.skills
        ):
            result.append(item)
    return result


def filter_by_category(items: Sequence[T], category: str | None) -> list[T]:
    """Keep items whose category equals ``category`` exactly; ``None`` keeps all."""
    if not category:
        return list(items)
    return [item for item in items if _posting_of(item).category == category]


def top_n(items: Sequence[T], n: int) -> list[T]:
    """First ``n`` items; ``n <= 0`` gives an empty list."""
    if n <= 0:
        return []
    return list(items[:n])

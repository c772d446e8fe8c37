"""
Interaction boosting: re-weight base scores using the profile's history.

Boost components (all non-negative with default config)
--------------------------------------------------------
direct:
    Sum over interactions that target this posting:
        view +2, bookmark +5, application +0, similar_view +1, unknown 0.

category interest:
    +3 when the posting's category was seen in a non-application interaction
    with any posting of the batch.

skill interest:
    +1 per posting skill seen in a non-application interaction with any
    posting of the batch (uncapped).

    boosted_score = base_score + direct + category + skills   (not clamped)

Applications are excluded from interest inference: applying signals
commitment to one posting, not browsing interest in its category.

Interactions whose ``posting_id`` is not in the batch are ignored entirely.
The log is read-only; the function indexes it once, so cost is
O(postings + interactions) rather than a per-posting scan.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from opportunity_ranker.config import BoostConfig
from opportunity_ranker.models.interaction import Interaction
from opportunity_ranker.models.scored import ScoredPosting
from opportunity_ranker.taxonomy.interaction_taxonomy import InteractionKind

logger = logging.getLogger(__name__)

_DEFAULT_INCREMENTS = BoostConfig()


def apply_interaction_boost(
    scored: Sequence[ScoredPosting],
    interactions: Iterable[Interaction] | None,
    increments: BoostConfig | None = None,
) -> list[ScoredPosting]:
    """Add ``interaction_boost`` and ``boosted_score`` to every scored posting.

    Args:
        scored:       Output of the compatibility stage, in batch order.
        interactions: The profile's interaction log. ``None`` or empty leaves
                      every ``boosted_score`` equal to ``base_score``.
        increments:   Boost values. Defaults to ``BoostConfig()``.

    Returns:
        New ScoredPosting list, same order and length as ``scored``.
    """
    inc = increments or _DEFAULT_INCREMENTS
    log = list(interactions or ())

    if not log:
        return [sp.with_boost(0) for sp in scored]

    batch = {sp.posting.posting_id: sp.posting for sp in scored}

    # ── Pass 1: index the log against the batch ──────────────────────────────
    direct: dict[int, float] = defaultdict(float)
    interested_categories: set[str] = set()
    interested_skills: set[str] = set()
    ignored = 0

    for interaction in log:
        target = batch.get(interaction.posting_id)
        if target is None:
            ignored += 1
            continue

        direct[interaction.posting_id] += inc.increment_for(interaction.kind)

        if interaction.kind != InteractionKind.APPLICATION:
            if target.category:
                interested_categories.add(target.category)
            interested_skills.update(target.skills)

    if ignored:
        logger.debug(
            "Ignored %d interaction(s) referencing postings outside the batch.", ignored
        )

    # ── Pass 2: boost each posting ───────────────────────────────────────────
    boosted: list[ScoredPosting] = []
    for sp in scored:
        posting = sp.posting
        boost = direct.get(posting.posting_id, 0.0)

        if posting.category and posting.category in interested_categories:
            boost += inc.category_interest

        overlap = sum(1 for skill in posting.skills if skill in interested_skills)
        boost += overlap * inc.skill_interest

        boosted.append(sp.with_boost(boost))

    return boosted

"""
ASCII terminal formatters for CLI ranking output.

Formatters accept ranked ``ScoredPosting`` lists and return plain multi-line
strings suitable for ``typer.echo()``. No third-party dependencies.

    Rank  Title                           Category              Match   Final
    --------------------------------------------------------------------------
       1  Research Assistant - AI Proj…   Academic Project         70    78.4
"""

from __future__ import annotations

from typing import Sequence

from opportunity_ranker.config import ScoringConfig
from opportunity_ranker.models.scored import ScoredPosting
from opportunity_ranker.ranking.compatibility import build_match_reasons

_TITLE_WIDTH = 32
_CATEGORY_WIDTH = 22


def _truncate(text: str | None, width: int) -> str:
    text = text or ""
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


def format_ranking_table(
    ranked: Sequence[ScoredPosting],
    profile_id: str,
    show_reasons: bool = False,
    weights: ScoringConfig | None = None,
) -> str:
    """Format a ranked list as an ASCII table.

    Args:
        ranked:       Ranked postings (already sorted by the pipeline).
        profile_id:   Profile the ranking was produced for (header).
        show_reasons: Append the match reasons below each row.
        weights:      Scoring weights the ranking used; reasons compare
                      criterion points against them. Defaults to
                      ``ScoringConfig()``.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommended Opportunities ===")
    lines.append(f"  Profile: {profile_id}")

    if not ranked:
        lines.append("")
        lines.append("  (no postings to rank)")
        return "\n".join(lines)

    header = (
        f"  {'Rank':>4}  {'Title':<{_TITLE_WIDTH}}  {'Category':<{_CATEGORY_WIDTH}}  "
        f"{'Match':>5}  {'Boost':>5}  {'Final':>6}"
    )
    lines.append("")
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for rank, sp in enumerate(ranked, start=1):
        boost = sp.interaction_boost if sp.interaction_boost is not None else 0.0
        final = sp.final_score if sp.final_score is not None else float(sp.base_score)
        lines.append(
            f"  {rank:>4}  {_truncate(sp.posting.title, _TITLE_WIDTH):<{_TITLE_WIDTH}}  "
            f"{_truncate(sp.posting.category, _CATEGORY_WIDTH):<{_CATEGORY_WIDTH}}  "
            f"{sp.match_score:>5}  {boost:>5.0f}  {final:>6.1f}"
        )
        if show_reasons and sp.breakdown is not None:
            for reason in build_match_reasons(sp.breakdown, weights):
                lines.append(f"        - {reason}")

    return "\n".join(lines)

"""
Export helpers for ranked recommendations.

All functions write to disk and return the written ``Path``.
``export_to_csv`` / ``export_to_json`` accept generic ``list[dict]`` data;
``write_ranking_files`` is the adapter the CLI uses to turn a ranked
``ScoredPosting`` list into both files.

CSV exports are flat: ``skills`` is joined with ``"; "`` so the file loads
directly in a spreadsheet without any pre-processing step.

Output files
------------
  data/outputs/
    recommendations_{profile_id}_{date}.csv
    recommendations_{profile_id}_{date}.json
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Sequence

from opportunity_ranker.models.scored import ScoredPosting

logger = logging.getLogger(__name__)

RANKING_FIELDNAMES: list[str] = [
    "rank", "posting_id", "title", "category", "department", "skills",
    "experience_level", "posted_by", "match_score", "interaction_boost",
    "boosted_score", "trending", "recommendation_score",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def ranking_records(ranked: Sequence[ScoredPosting]) -> list[dict]:
    """One flat record per ranked posting with a 1-based ``rank``."""
    return [
        {"rank": rank, **sp.to_record()}
        for rank, sp in enumerate(ranked, start=1)
    ]


def write_ranking_files(
    ranked: Sequence[ScoredPosting],
    output_dir: Path,
    profile_id: str,
    run_date: date | None = None,
) -> tuple[Path, Path]:
    """Write a ranking as CSV and JSON.

    The JSON file wraps the records with ``profile_id`` and ``generated_at``
    metadata; the CSV holds the records only.

    Args:
        ranked:     Ranked postings.
        output_dir: Directory to write into (created if missing).
        profile_id: Profile the ranking belongs to (used in filenames).
        run_date:   Date label for the filenames. Defaults to today.

    Returns:
        ``(csv_path, json_path)``.
    """
    if run_date is None:
        run_date = date.today()

    records = ranking_records(ranked)
    stem = f"recommendations_{profile_id}_{run_date}"

    csv_rows = [
        {**rec, "skills": "; ".join(rec.get("skills") or [])} for rec in records
    ]
    csv_path = export_to_csv(
        csv_rows, output_dir / f"{stem}.csv", fieldnames=RANKING_FIELDNAMES
    )
    json_path = export_to_json(
        {
            "profile_id":   profile_id,
            "generated_at": datetime.now(tz=timezone.utc).isoformat(),
            "count":        len(records),
            "recommendations": records,
        },
        output_dir / f"{stem}.json",
    )

    logger.info("Wrote %d ranked posting(s) to %s and %s", len(records), csv_path, json_path)
    return csv_path, json_path

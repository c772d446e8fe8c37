"""
JSON loader: exported postings / profile / interaction files -> models.

Accepted shapes
---------------
postings      : ``[{...}, ...]``  or  ``{"postings": [{...}, ...]}``
profile       : ``{...}``         or  ``{"profile": {...}}``
interactions  : ``[{...}, ...]``  or  ``{"interactions": [{...}, ...]}``

Records may use the front-end's camelCase / legacy keys (``id``, ``type``,
``experienceLevel``, ``jobId``, ``userId``); see the model aliases.

Validation rules
----------------
- Missing files raise ``FileNotFoundError``.
- Unparseable JSON or a top level of the wrong shape raises ``ValueError``.
- Any record failing model validation raises ``pydantic.ValidationError``
  (a ``ValueError`` subclass) naming the offending index.
- Duplicate posting ids are rejected; ids must be unique within a catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from opportunity_ranker.models.interaction import Interaction
from opportunity_ranker.models.posting import Posting, Profile

log = logging.getLogger(__name__)

_POSTINGS_ADAPTER = TypeAdapter(list[Posting])
_INTERACTIONS_ADAPTER = TypeAdapter(list[Interaction])


def _read_json(path: Path) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def _unwrap(raw: Any, key: str, expected: type, path: Path) -> Any:
    if isinstance(raw, dict) and key in raw:
        raw = raw[key]
    if not isinstance(raw, expected):
        raise ValueError(
            f"{path}: expected a JSON {expected.__name__} of {key}, "
            f"got {type(raw).__name__}."
        )
    return raw


def load_postings(path: Path) -> list[Posting]:
    """Load and validate a postings catalog.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On bad JSON, wrong shape, invalid records or duplicate ids.
    """
    raw = _unwrap(_read_json(path), "postings", list, path)
    postings = _POSTINGS_ADAPTER.validate_python(raw)

    seen: set[int] = set()
    for i, posting in enumerate(postings):
        if posting.posting_id in seen:
            raise ValueError(
                f"{path}: duplicate posting_id {posting.posting_id} at index {i}."
            )
        seen.add(posting.posting_id)

    log.info("Loaded %d posting(s) from %s", len(postings), path)
    return postings


def load_profile(path: Path) -> Profile:
    """Load and validate a single profile.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On bad JSON, wrong shape or an invalid record.
    """
    raw = _unwrap(_read_json(path), "profile", dict, path)
    profile = Profile.model_validate(raw)
    log.info("Loaded profile %s from %s", profile.profile_id, path)
    return profile


def load_interactions(path: Path) -> list[Interaction]:
    """Load and validate an interaction log.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On bad JSON, wrong shape or invalid records.
    """
    raw = _unwrap(_read_json(path), "interactions", list, path)
    interactions = _INTERACTIONS_ADAPTER.validate_python(raw)
    unknown = sum(1 for i in interactions if not i.is_known_kind)
    if unknown:
        log.warning(
            "%d interaction(s) in %s have unknown kinds and will earn no boost.",
            unknown, path,
        )
    log.info("Loaded %d interaction(s) from %s", len(interactions), path)
    return interactions

"""
Interaction log records.

An ``Interaction`` is one event in a profile's behaviour log: the profile
viewed, bookmarked or applied to a posting. The log is append-only; records
are frozen and are only ever accumulated and read.

``kind`` is a plain string rather than ``InteractionKind`` so that logs
containing kinds the ranker does not know about still load. Unknown kinds
earn no boost.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from opportunity_ranker.taxonomy.interaction_taxonomy import KNOWN_KINDS


class Interaction(BaseModel):
    """A single logged interaction between a profile and a posting.

    Attributes:
        profile_id: Subject of the interaction.
        posting_id: Target posting. Only postings in the current ranking
            batch are considered; other targets are ignored.
        kind: Interaction kind, normally an ``InteractionKind`` value.
        timestamp: When the interaction happened (UTC).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    profile_id: str = Field(validation_alias=AliasChoices("profile_id", "userId"))
    posting_id: int = Field(validation_alias=AliasChoices("posting_id", "jobId"))
    kind: str = Field(validation_alias=AliasChoices("kind", "type"))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @field_validator("kind")
    @classmethod
    def normalize_kind(cls, v: str) -> str:
        return v.strip().lower().replace("-", "_")

    @field_validator("timestamp")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def is_known_kind(self) -> bool:
        return self.kind in KNOWN_KINDS

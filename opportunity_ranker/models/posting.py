"""
Posting and profile models.

``Posting`` is one opportunity in the catalog (academic project, hackathon
team, startup collaboration, part-time job). ``Profile`` is the individual
the catalog is ranked for.

Both models are frozen: a ranking pass treats them as immutable snapshots
supplied by the caller. Field validation is deliberately loose. Compatibility
scoring degrades gracefully on missing fields, so ``None`` and empty
collections are legal everywhere except identifiers and titles.

Aliases accept the camelCase / legacy keys emitted by the web front-end
(``id``, ``type``, ``experienceLevel``) so its JSON exports load unchanged.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _clean_strings(values: tuple[str, ...]) -> tuple[str, ...]:
    """Strip entries and drop blanks, preserving order."""
    return tuple(v.strip() for v in values if v and v.strip())


class Posting(BaseModel):
    """An opportunity posting.

    Attributes:
        posting_id: Unique, monotonically issued identifier. Larger ids are
            assumed to be newer (used only as a recency proxy).
        title: Display title.
        category: Free-text taxonomy label, e.g. ``"Academic Project"``.
        department: Owning department or field.
        skills: Required skills; order is irrelevant.
        experience_level: Expected level on the ``ExperienceLevel`` scale.
            Unknown labels are kept as-is and earn no experience credit.
        posted_by: Display name of the poster.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    posting_id: int = Field(
        ge=0, validation_alias=AliasChoices("posting_id", "id"),
    )
    title: str
    category: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("category", "type"),
    )
    department: Optional[str] = None
    skills: tuple[str, ...] = ()
    experience_level: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("experience_level", "experienceLevel"),
    )
    posted_by: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("posted_by", "postedBy"),
    )

    @field_validator("skills")
    @classmethod
    def strip_blank_skills(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _clean_strings(v)


class Profile(BaseModel):
    """The individual a catalog is ranked for.

    Attributes:
        profile_id: Stable identifier; matches ``Interaction.profile_id``.
        name: Display name.
        department: Home department or field.
        skills: Skills the individual claims.
        experience_level: Self-reported level on the ``ExperienceLevel`` scale.
        interests: Free-text category-like interests, e.g. ``"Hackathon"``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    profile_id: str = Field(validation_alias=AliasChoices("profile_id", "id"))
    name: Optional[str] = None
    department: Optional[str] = None
    skills: tuple[str, ...] = ()
    experience_level: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("experience_level", "experienceLevel"),
    )
    interests: tuple[str, ...] = ()

    @field_validator("skills", "interests")
    @classmethod
    def strip_blank_entries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _clean_strings(v)

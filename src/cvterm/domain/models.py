"""Core domain models for the cvterm system.

These models represent the data flowing through the system: the CV
document served by the remote endpoint, the cache status snapshot, and
the typed result produced for every submitted command line.

The remote endpoint speaks JSON Resume, so every model accepts the
camelCase JSON keys as aliases while exposing descriptive Python
attribute names.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Content of the ``clear`` result. The front end must wipe its transcript
# instead of printing this value.
CLEAR_SENTINEL = "CLEAR_TERMINAL"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class OutputKind(str, enum.Enum):
    """Severity classification of a command result, used for rendering."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class ErrorKind(str, enum.Enum):
    """Why a command produced an error result."""

    DATA_UNAVAILABLE = "data_unavailable"
    COMMAND_NOT_FOUND = "command_not_found"
    INTERNAL = "internal"


# ---------------------------------------------------------------------------
# Document Models
# ---------------------------------------------------------------------------


class _DocumentPart(BaseModel):
    """Shared configuration for every piece of the CV document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_lists_to_empty(cls, data: Any) -> Any:
        # The endpoint sends null for empty list sections.
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, field in cls.model_fields.items():
            if field.default_factory is not list:
                continue
            for key in {name, field.alias or name}:
                if key in data and data[key] is None:
                    data[key] = []
        return data


class Location(_DocumentPart):
    city: str = ""
    region: str = ""
    country_code: str = Field(default="", alias="countryCode")


class Profile(_DocumentPart):
    """A social network profile attached to the identity."""

    network: str
    username: str = ""
    url: str = ""


class Identity(_DocumentPart):
    """Who the CV belongs to (the ``basics`` section of JSON Resume)."""

    name: str
    title: str = Field(default="", alias="label")
    email: str = ""
    summary: str = ""
    location: Location = Field(default_factory=Location)
    profiles: list[Profile] = Field(default_factory=list)


class WorkEntry(_DocumentPart):
    """A single engagement. A missing end date means the role is ongoing."""

    employer: str = Field(alias="company")
    role: str = Field(alias="position")
    start: str = Field(default="", alias="startDate")
    end: str | None = Field(default=None, alias="endDate")
    highlights: list[str] = Field(default_factory=list)


class EducationEntry(_DocumentPart):
    institution: str
    area: str = ""
    study_type: str = Field(default="", alias="studyType")
    start: str = Field(default="", alias="startDate")
    end: str = Field(default="", alias="endDate")
    courses: list[str] = Field(default_factory=list)


class SkillGroup(_DocumentPart):
    name: str
    level: str = ""
    keywords: list[str] = Field(default_factory=list)


class LanguageProficiency(_DocumentPart):
    language: str
    fluency: str = ""


class Interest(_DocumentPart):
    name: str
    keywords: list[str] = Field(default_factory=list)


class Project(_DocumentPart):
    name: str
    description: str = ""
    highlights: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    url: str | None = None


class DocumentMeta(_DocumentPart):
    version: str = ""
    theme: str = ""


class Document(_DocumentPart):
    """An immutable snapshot of the CV as served by the remote endpoint.

    Every section is optional. A new fetch always produces a new
    Document; snapshots are never merged.
    """

    identity: Identity | None = Field(default=None, alias="basics")
    work_history: list[WorkEntry] = Field(default_factory=list, alias="work")
    education: list[EducationEntry] = Field(default_factory=list)
    skill_groups: list[SkillGroup] = Field(default_factory=list, alias="skills")
    language_proficiencies: list[LanguageProficiency] = Field(
        default_factory=list, alias="languages"
    )
    interests: list[Interest] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    meta: DocumentMeta | None = None


# ---------------------------------------------------------------------------
# Cache Models
# ---------------------------------------------------------------------------


class CacheStatus(BaseModel):
    """Metadata about the cache slot. Reading it never triggers a fetch."""

    model_config = ConfigDict(frozen=True)

    cached: bool = Field(description="Whether a document is held in the cache")
    age_ms: int | None = Field(
        default=None, description="Milliseconds since the cached document was fetched"
    )
    ttl_ms: int = Field(ge=0, description="Configured freshness window in milliseconds")


# ---------------------------------------------------------------------------
# Command Result
# ---------------------------------------------------------------------------


class CommandOutput(BaseModel):
    """The result of executing one command line.

    ``content`` is rendered verbatim by the front end, except for the
    clear sentinel which instructs it to discard prior output.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    kind: OutputKind
    error: ErrorKind | None = Field(
        default=None, description="Set on error results to classify the failure"
    )

    @property
    def is_error(self) -> bool:
        return self.kind is OutputKind.ERROR

    @property
    def is_clear(self) -> bool:
        """Whether the front end should wipe its transcript."""
        return self.content == CLEAR_SENTINEL

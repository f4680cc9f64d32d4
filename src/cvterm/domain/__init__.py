"""Domain models for cvterm.

This package contains the CV document models, the cache status value
object and the command result type. All models use Pydantic v2 for
validation and serialization.
"""

from cvterm.domain.models import (
    CLEAR_SENTINEL,
    CacheStatus,
    CommandOutput,
    Document,
    DocumentMeta,
    EducationEntry,
    ErrorKind,
    Identity,
    Interest,
    LanguageProficiency,
    Location,
    OutputKind,
    Profile,
    Project,
    SkillGroup,
    WorkEntry,
)

__all__ = [
    "CLEAR_SENTINEL",
    "CacheStatus",
    "CommandOutput",
    "Document",
    "DocumentMeta",
    "EducationEntry",
    "ErrorKind",
    "Identity",
    "Interest",
    "LanguageProficiency",
    "Location",
    "OutputKind",
    "Profile",
    "Project",
    "SkillGroup",
    "WorkEntry",
]

"""Text views of the CV document, one per command.

Formatters are pure: the same document and settings always produce the
same text, and the document is never modified. A formatter either
returns a complete view or raises; it never returns partial output.
"""

from __future__ import annotations

import logging

from cvterm.commands.text import box, bullets, section, wrap_words
from cvterm.domain.models import CacheStatus, Document, Identity

logger = logging.getLogger(__name__)

OPEN_ENDED = "Present"

# Documented order of the help listing. Descriptions must not contain
# any command name.
HELP_ENTRIES: list[tuple[str, str]] = [
    ("info", "Display basic personal details"),
    ("work", "Show employment history and achievements"),
    ("experience", "Alias of the employment history view"),
    ("education", "Display academic background"),
    ("skills", "List technical proficiencies"),
    ("projects", "Show portfolio and achievements"),
    ("languages", "List spoken language proficiencies"),
    ("interests", "Display personal hobbies"),
    ("contact", "Show email, location and social links"),
    ("cache", "Display data freshness and expiry"),
    ("clear", "Wipe the terminal screen"),
    ("whoami", "Display current user name and title"),
    ("help", "Show this message"),
]


class SectionMissing(LookupError):
    """The document lacks a section the requested view requires."""

    def __init__(self, section_name: str) -> None:
        super().__init__(f"CV document has no {section_name} section")
        self.section_name = section_name


def format_help() -> str:
    rows = [f"  {name:<13}{description}" for name, description in HELP_ENTRIES]
    return (
        box("AVAILABLE COMMANDS", rows)
        + "\n\nUsage: Type any command and press Enter to explore the CV!"
        + "\nTip: Commands are case-insensitive."
    )


def format_cache_status(status: CacheStatus) -> str:
    """Cache age, TTL and time to expiry in whole minutes.

    Expiry is the plain difference and goes negative for a stale entry.
    """
    ttl_minutes = status.ttl_ms // 60000
    if not status.cached:
        return f"Cache Status:\n\nStatus: No cache\nTTL: {ttl_minutes} minutes"
    age_minutes = (status.age_ms or 0) // 60000
    return (
        "Cache Status:\n\n"
        "Status: Cached\n"
        f"Age: {age_minutes} minutes\n"
        f"TTL: {ttl_minutes} minutes\n"
        f"Expires in: {ttl_minutes - age_minutes} minutes"
    )


class DocumentFormatter:
    """Renders the document-backed views.

    Args:
        wrap_width: Column budget for wrapped highlight lines.
    """

    def __init__(self, wrap_width: int = 56) -> None:
        self.wrap_width = wrap_width

    def info(self, document: Document) -> str:
        identity = _require_identity(document)
        location = ", ".join(
            part
            for part in (
                identity.location.city,
                identity.location.region,
                identity.location.country_code,
            )
            if part
        )
        rows = [
            f"  Name:        {identity.name}",
            f"  Title:       {identity.title}",
            f"  Location:    {location}",
            f"  Email:       {identity.email}",
        ]
        output = box("PERSONAL INFORMATION", rows)
        if identity.summary:
            output += f"\n\nPROFESSIONAL SUMMARY\n{identity.summary}"
        return output

    def whoami(self, document: Document) -> str:
        identity = _require_identity(document)
        if identity.title:
            return f"{identity.name} ({identity.title})"
        return identity.name

    def work(self, document: Document) -> str:
        rows: list[str] = []
        for index, job in enumerate(document.work_history):
            if index:
                rows.append("")
            rows.append(f"  {job.role}")
            rows.append(f"      {job.employer}")
            rows.append(f"      {job.start} - {job.end or OPEN_ENDED}")
            if job.highlights:
                rows.append("")
                rows.append("      Key Achievements:")
                rows.extend(bullets(job.highlights, indent="      ", width=self.wrap_width))
        return box("WORK EXPERIENCE", rows)

    def education(self, document: Document) -> str:
        blocks = []
        for entry in document.education:
            lines = [
                f"{entry.study_type} in {entry.area}",
                entry.institution,
                f"{entry.start} - {entry.end}",
            ]
            if entry.courses:
                lines += ["", "Courses:", *bullets(entry.courses)]
            blocks.append("\n".join(lines))
        return section("Education:", blocks)

    def skills(self, document: Document) -> str:
        blocks = []
        for group in document.skill_groups:
            heading = f"{group.name} ({group.level}):" if group.level else f"{group.name}:"
            blocks.append("\n".join([heading, *bullets(group.keywords)]))
        return section("Technical Skills:", blocks)

    def projects(self, document: Document) -> str:
        blocks = []
        for project in document.projects:
            lines = [project.name]
            lines += wrap_words(project.description, self.wrap_width)
            if project.url:
                lines.append(f"URL: {project.url}")
            if project.highlights:
                lines += ["", "Highlights:", *bullets(project.highlights, width=self.wrap_width)]
            if project.keywords:
                lines += ["", "Technologies:", *bullets(project.keywords)]
            blocks.append("\n".join(lines))
        return section("Projects:", blocks)

    def languages(self, document: Document) -> str:
        lines = [f"{lang.language}: {lang.fluency}" for lang in document.language_proficiencies]
        return section("Languages:", lines, separator="\n")

    def interests(self, document: Document) -> str:
        blocks = [
            "\n".join([interest.name, *bullets(interest.keywords)])
            for interest in document.interests
        ]
        return section("Personal Interests:", blocks)

    def contact(self, document: Document) -> str:
        identity = _require_identity(document)
        location = ", ".join(
            part for part in (identity.location.city, identity.location.region) if part
        )
        output = f"Contact Information:\n\nEmail: {identity.email}\nLocation: {location}"
        if identity.profiles:
            profiles = "\n".join(f"{p.network}: {p.url}" for p in identity.profiles)
            output += f"\n\nSocial Profiles:\n{profiles}"
        return output


def _require_identity(document: Document) -> Identity:
    if document.identity is None:
        raise SectionMissing("basics")
    return document.identity

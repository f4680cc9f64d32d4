"""Command dispatcher.

Resolves a raw command line to one of a fixed set of commands, fetches
the document from the cache when the command needs it, and returns a
typed CommandOutput.

    User types: "WORK --all"
                  ↓
    parse_line → name "work", args ["--all"] (ignored)
                  ↓
    resolve("work") → Command.WORK
                  ↓
    DataCache.get() → Document
                  ↓
    DocumentFormatter.work(document) → CommandOutput(kind=success)

execute() is the boundary of the core: every failure below it is turned
into an error result, so callers only ever render text.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, NamedTuple

from cvterm.cache.data_cache import DataCache
from cvterm.commands.formatters import (
    DocumentFormatter,
    SectionMissing,
    format_cache_status,
    format_help,
)
from cvterm.domain.models import (
    CLEAR_SENTINEL,
    CommandOutput,
    Document,
    ErrorKind,
    OutputKind,
)
from cvterm.source.base import FetchFailed

logger = logging.getLogger(__name__)

DATA_UNAVAILABLE_MESSAGE = "Error: Unable to load CV data. Please check your connection."
SECTION_MISSING_MESSAGE = "CV data not available"


class Command(str, enum.Enum):
    """Every command kind the terminal understands."""

    HELP = "help"
    INFO = "info"
    WHOAMI = "whoami"
    WORK = "work"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    LANGUAGES = "languages"
    INTERESTS = "interests"
    CONTACT = "contact"
    CACHE = "cache"
    CLEAR = "clear"


ALIASES: dict[str, Command] = {
    "experience": Command.WORK,
}

# Commands answered without the document.
STATIC_COMMANDS = frozenset({Command.HELP, Command.CACHE, Command.CLEAR})


class ParsedLine(NamedTuple):
    token: str
    name: str
    args: list[str]


def parse_line(line: str) -> ParsedLine:
    """Split a command line into the command token and its arguments.

    ``name`` is the lower-cased token; ``token`` keeps the original case.
    """
    parts = line.split()
    if not parts:
        return ParsedLine(token="", name="", args=[])
    return ParsedLine(token=parts[0], name=parts[0].lower(), args=parts[1:])


def resolve(name: str) -> Command | None:
    """Map a lower-cased command name to its Command, or None if unknown."""
    if name in ALIASES:
        return ALIASES[name]
    try:
        return Command(name)
    except ValueError:
        return None


class Dispatcher:
    """Executes command lines against a DataCache.

    Args:
        cache: Source of the document and of cache status.
        formatter: Renders document-backed views. Defaults to a
            DocumentFormatter with the standard wrap width.
    """

    def __init__(self, cache: DataCache, formatter: DocumentFormatter | None = None) -> None:
        self._cache = cache
        self._formatter = formatter or DocumentFormatter()
        self._document_views: dict[Command, Callable[[Document], str]] = {
            Command.INFO: self._formatter.info,
            Command.WHOAMI: self._formatter.whoami,
            Command.WORK: self._formatter.work,
            Command.EDUCATION: self._formatter.education,
            Command.SKILLS: self._formatter.skills,
            Command.PROJECTS: self._formatter.projects,
            Command.LANGUAGES: self._formatter.languages,
            Command.INTERESTS: self._formatter.interests,
            Command.CONTACT: self._formatter.contact,
        }
        unhandled = set(Command) - STATIC_COMMANDS - self._document_views.keys()
        if unhandled:
            raise RuntimeError(f"No view for commands: {sorted(c.value for c in unhandled)}")

    @property
    def cache(self) -> DataCache:
        return self._cache

    async def execute(self, line: str) -> CommandOutput:
        """Run one command line. Never raises; failures become error results."""
        parsed = parse_line(line)
        if not parsed.name:
            return CommandOutput(content="", kind=OutputKind.INFO)

        command = resolve(parsed.name)
        if command is None:
            logger.debug("Unknown command: %s", parsed.token)
            return CommandOutput(
                content=f"Command not found: {parsed.token}. Type 'help' for available commands.",
                kind=OutputKind.ERROR,
                error=ErrorKind.COMMAND_NOT_FOUND,
            )

        if parsed.args:
            logger.debug("Ignoring arguments for %s: %s", command.value, parsed.args)

        try:
            return await self._run(command)
        except Exception:
            logger.exception("Command %s failed", command.value)
            return CommandOutput(
                content=f"Error: the '{command.value}' command failed unexpectedly.",
                kind=OutputKind.ERROR,
                error=ErrorKind.INTERNAL,
            )

    async def _run(self, command: Command) -> CommandOutput:
        if command is Command.HELP:
            return CommandOutput(content=format_help(), kind=OutputKind.INFO)
        if command is Command.CLEAR:
            return CommandOutput(content=CLEAR_SENTINEL, kind=OutputKind.INFO)
        if command is Command.CACHE:
            return CommandOutput(
                content=format_cache_status(self._cache.status()), kind=OutputKind.INFO
            )

        try:
            document = await self._cache.get()
        except FetchFailed as e:
            logger.error("CV data unavailable for %s: %s", command.value, e)
            return CommandOutput(
                content=DATA_UNAVAILABLE_MESSAGE,
                kind=OutputKind.ERROR,
                error=ErrorKind.DATA_UNAVAILABLE,
            )

        try:
            content = self._document_views[command](document)
        except SectionMissing as e:
            logger.warning("Cannot render %s: %s", command.value, e)
            return CommandOutput(
                content=SECTION_MISSING_MESSAGE,
                kind=OutputKind.ERROR,
                error=ErrorKind.DATA_UNAVAILABLE,
            )
        return CommandOutput(content=content, kind=OutputKind.SUCCESS)

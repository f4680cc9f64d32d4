"""Command dispatching and text formatting for cvterm.

Public API:
    Dispatcher -- Resolves command lines to formatted CommandOutput
    Command -- The closed set of command kinds
    parse_line / resolve -- Parsing helpers
    DocumentFormatter -- Renders document-backed views
"""

from cvterm.commands.dispatcher import (
    ALIASES,
    Command,
    Dispatcher,
    ParsedLine,
    parse_line,
    resolve,
)
from cvterm.commands.formatters import DocumentFormatter, SectionMissing

__all__ = [
    "ALIASES",
    "Command",
    "Dispatcher",
    "DocumentFormatter",
    "ParsedLine",
    "SectionMissing",
    "parse_line",
    "resolve",
]

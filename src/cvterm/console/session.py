"""Interactive terminal session.

Reads command lines one at a time, waits for each to finish before
reading the next, and renders the results. The clear sentinel wipes the
transcript and the screen instead of being printed.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Awaitable, Callable

from cvterm.commands.dispatcher import Dispatcher
from cvterm.domain.models import CommandOutput

logger = logging.getLogger(__name__)

PROMPT = "$ "
CLEAR_SCREEN = "\x1b[2J\x1b[H"
EXIT_COMMANDS = frozenset({"exit", "quit"})

WELCOME = """\
┌─────────────────────────────────────────────────────────────────────────┐
│                      Welcome to CV Terminal v1.0                        │
└─────────────────────────────────────────────────────────────────────────┘

Type 'help' to see available commands."""

Reader = Callable[[str], Awaitable[str | None]]
Writer = Callable[[str], None]


async def read_stdin(prompt: str) -> str | None:
    """Read a line from stdin without blocking the event loop. None on EOF."""
    try:
        return await asyncio.to_thread(input, prompt)
    except EOFError:
        return None


def write_stdout(text: str) -> None:
    sys.stdout.write(text + "\n")
    sys.stdout.flush()


class TerminalSession:
    """A line-oriented front end for the dispatcher.

    Args:
        dispatcher: Executes each submitted line.
        reader: Awaitable line source; returns None at end of input.
        writer: Receives rendered text.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        reader: Reader = read_stdin,
        writer: Writer = write_stdout,
    ) -> None:
        self._dispatcher = dispatcher
        self._reader = reader
        self._writer = writer
        self._history: list[str] = []

    @property
    def history(self) -> list[str]:
        """The text currently on screen, in display order."""
        return list(self._history)

    async def run(self) -> None:
        """Process lines until EOF or an exit command."""
        self._emit(WELCOME)
        while True:
            line = await self._reader(PROMPT)
            if line is None:
                logger.debug("End of input, closing session")
                break
            if line.strip().lower() in EXIT_COMMANDS:
                break
            await self.submit(line)

    async def submit(self, line: str) -> CommandOutput | None:
        """Execute one line and render its result. Blank lines are ignored."""
        if not line.strip():
            return None
        output = await self._dispatcher.execute(line)
        if output.is_clear:
            self._history.clear()
            self._writer(CLEAR_SCREEN)
            return output
        self._history.append(f"{PROMPT}{line.strip()}")
        self._emit(output.content)
        return output

    def _emit(self, text: str) -> None:
        self._history.append(text)
        self._writer(text)

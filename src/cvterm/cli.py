"""Command-line interface for cvterm.

Provides the main entry point for running the interactive terminal,
executing a single command, or starting the HTTP endpoint server.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from cvterm.cache.data_cache import DataCache
from cvterm.commands.dispatcher import Dispatcher
from cvterm.commands.formatters import DocumentFormatter
from cvterm.config.settings import Settings
from cvterm.source.http_source import HttpDocumentSource

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cvterm",
        description="Simulated terminal serving views of a CV",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/cvterm.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("shell", help="Start the interactive terminal")
    run_parser = subparsers.add_parser("run", help="Execute a single command line")
    run_parser.add_argument(
        "line", nargs="+",
        help="Command and arguments, e.g. 'work' or 'help'",
    )
    subparsers.add_parser("serve", help="Start the HTTP endpoint server")

    return parser.parse_args(argv)


def build_components(settings: Settings) -> tuple[HttpDocumentSource, Dispatcher]:
    """Wire the document source, cache and dispatcher from settings."""
    source = HttpDocumentSource(url=settings.source.url, timeout=settings.source.timeout)
    cache = DataCache(source, ttl_ms=settings.cache.ttl_ms)
    dispatcher = Dispatcher(cache, formatter=DocumentFormatter(settings.console.wrap_width))
    return source, dispatcher


async def _run_once(settings: Settings, line: str) -> int:
    """Execute one command line and print the result."""
    source, dispatcher = build_components(settings)
    async with source:
        output = await dispatcher.execute(line)
    if output.is_clear:
        return 0
    stream = sys.stderr if output.is_error else sys.stdout
    print(output.content, file=stream)
    return 1 if output.is_error else 0


async def _run_shell(settings: Settings) -> None:
    """Run the interactive terminal until EOF or exit."""
    from cvterm.console.session import TerminalSession

    source, dispatcher = build_components(settings)
    async with source:
        await TerminalSession(dispatcher).run()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the cvterm CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from cvterm.config.settings import load_settings
    from cvterm.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "shell":
        logger.info("Starting interactive terminal")
        try:
            asyncio.run(_run_shell(settings))
        except KeyboardInterrupt:
            pass

    elif args.command == "run":
        sys.exit(asyncio.run(_run_once(settings, " ".join(args.line))))

    elif args.command == "serve":
        logger.info("Starting endpoint server")
        from cvterm.endpoint.server import main as serve

        serve(settings)


if __name__ == "__main__":
    main()

"""FastAPI HTTP server exposing the command dispatcher.

A browser or any other front end submits command lines and renders the
returned content. Commands are executed one at a time.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from pydantic import BaseModel, Field

from cvterm.commands.dispatcher import Dispatcher
from cvterm.config.settings import Settings, load_settings
from cvterm.domain.models import CacheStatus, CommandOutput
from cvterm.source.base import DocumentSource

logger = logging.getLogger(__name__)


class CommandRequest(BaseModel):
    line: str = Field(description="Raw command line as typed by the user")


class EndpointStatus(BaseModel):
    status: str = "ok"
    cache: CacheStatus


def create_app(dispatcher: Dispatcher, source: DocumentSource | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        dispatcher: Executes submitted command lines.
        source: Closed on shutdown when given.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Endpoint started")
        yield
        if source is not None:
            await source.close()
        logger.info("Endpoint stopped")

    app = FastAPI(
        title="cvterm Endpoint",
        description="HTTP front end for the CV terminal",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.dispatcher = dispatcher
    app.state.command_lock = asyncio.Lock()

    @app.get("/health")
    async def health_check() -> EndpointStatus:
        return EndpointStatus(cache=app.state.dispatcher.cache.status())

    @app.get("/cache")
    async def cache_status() -> CacheStatus:
        return app.state.dispatcher.cache.status()

    @app.post("/command")
    async def run_command(request: CommandRequest) -> CommandOutput:
        async with app.state.command_lock:
            output = await app.state.dispatcher.execute(request.line)
        logger.debug("Executed %r -> %s", request.line, output.kind.value)
        return output

    return app


def main(settings: Settings | None = None) -> None:
    """Run the endpoint server. Settings are loaded from disk when not given."""
    from cvterm.cli import build_components

    if settings is None:
        settings = load_settings()
    source, dispatcher = build_components(settings)
    app = create_app(dispatcher, source=source)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()

"""Time-bounded cache for the CV document.

The cache owns a single slot holding the last successfully fetched
document and the time it was fetched. Freshness is evaluated lazily on
each request; there is no background expiry timer.

Slot states::

    EMPTY --fetch ok--> FRESH --ttl elapsed--> STALE --fetch ok--> FRESH
    STALE --fetch failed--> STALE   (old document is served)
    EMPTY --fetch failed--> EMPTY   (FetchFailed propagates)
"""

from __future__ import annotations

import asyncio
import enum
import logging
import time
from typing import Callable

from pydantic import BaseModel, ConfigDict

from cvterm.domain.models import CacheStatus, Document
from cvterm.source.base import DocumentSource, FetchFailed

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 5 * 60 * 1000


class CacheState(str, enum.Enum):
    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"


class CacheEntry(BaseModel):
    """A fetched document and when it was fetched (clock milliseconds)."""

    model_config = ConfigDict(frozen=True)

    document: Document
    fetched_at_ms: float


class DataCache:
    """Serves the current document, fetching only when the entry is stale.

    Args:
        source: Where documents come from.
        ttl_ms: Maximum age in milliseconds for which the cached document
            is served without re-fetching. An entry whose age equals the
            TTL is stale.
        clock: Monotonic time source returning seconds.
    """

    def __init__(
        self,
        source: DocumentSource,
        ttl_ms: int = DEFAULT_TTL_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._ttl_ms = self._check_ttl(ttl_ms)
        self._clock = clock
        self._entry: CacheEntry | None = None
        self._lock = asyncio.Lock()

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    @property
    def state(self) -> CacheState:
        if self._entry is None:
            return CacheState.EMPTY
        return CacheState.FRESH if self._is_fresh(self._entry) else CacheState.STALE

    async def get(self) -> Document:
        """Return the current document.

        A fresh entry is returned without touching the network. Otherwise
        a fetch is attempted; if it fails and an older entry exists, the
        older document is returned unchanged.

        Concurrent callers are serialized, so callers arriving during a
        refresh receive the document that refresh produced.

        Raises:
            FetchFailed: If the fetch fails and nothing is cached.
        """
        async with self._lock:
            entry = self._entry
            if entry is not None and self._is_fresh(entry):
                return entry.document

            try:
                document = await self._source.fetch()
            except FetchFailed as e:
                if entry is None:
                    logger.error("Fetching CV data failed with nothing cached: %s", e)
                    raise
                logger.warning("Using stale cache due to fetch error: %s", e)
                return entry.document

            self._entry = CacheEntry(document=document, fetched_at_ms=self._now_ms())
            logger.info("Cached fresh CV document (ttl=%d ms)", self._ttl_ms)
            return document

    def status(self) -> CacheStatus:
        """Describe the slot without fetching."""
        if self._entry is None:
            return CacheStatus(cached=False, ttl_ms=self._ttl_ms)
        return CacheStatus(cached=True, age_ms=int(self._age_ms(self._entry)), ttl_ms=self._ttl_ms)

    def reconfigure(self, ttl_ms: int) -> None:
        """Use a new TTL for later freshness checks. The entry is kept."""
        self._ttl_ms = self._check_ttl(ttl_ms)
        logger.info("Cache TTL set to %d ms", ttl_ms)

    def invalidate(self) -> None:
        """Drop the cached entry."""
        self._entry = None
        logger.debug("Cache invalidated")

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._age_ms(entry) < self._ttl_ms

    def _age_ms(self, entry: CacheEntry) -> float:
        return self._now_ms() - entry.fetched_at_ms

    def _now_ms(self) -> float:
        return self._clock() * 1000.0

    @staticmethod
    def _check_ttl(ttl_ms: int) -> int:
        if ttl_ms < 0:
            raise ValueError(f"TTL must not be negative, got {ttl_ms}")
        return ttl_ms

"""Abstract base class for document retrieval.

All document sources must conform to this interface, so the cache can
be backed by the HTTP endpoint in production and by an in-memory fake
in tests without changing any other code.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from cvterm.domain.models import Document

logger = logging.getLogger(__name__)


class DocumentSource(ABC):
    """Abstract interface for retrieving the CV document.

    Example usage::

        async with HttpDocumentSource(url="https://example.com/cv.json") as source:
            document = await source.fetch()
    """

    @abstractmethod
    async def fetch(self) -> Document:
        """Retrieve a fresh copy of the document.

        Each call performs one retrieval; sources do not cache.

        Raises:
            FetchFailed: If the document cannot be retrieved or does
                not match the expected shape.
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the source.

        Safe to call multiple times.
        """

    async def __aenter__(self) -> DocumentSource:
        return self

    async def __aexit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        await self.close()


class FetchFailed(Exception):
    """Raised when the remote retrieval did not complete."""

    def __init__(self, message: str, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code

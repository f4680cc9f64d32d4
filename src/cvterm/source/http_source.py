"""HTTP document source.

Fetches the CV document as JSON from a fixed endpoint.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from cvterm.domain.models import Document
from cvterm.source.base import DocumentSource, FetchFailed

logger = logging.getLogger(__name__)


class HttpDocumentSource(DocumentSource):
    """Retrieves the document with one HTTP GET per fetch.

    A client passed in by the caller is used as-is and left open on
    close(); otherwise the source creates and owns its own client.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> Document:
        """GET the document and validate it against the Document model."""
        client = self._get_client()
        try:
            resp = await client.get(self._url, timeout=self._timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchFailed(
                f"Failed to fetch CV data: {e.response.status_code}",
                url=self._url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchFailed(f"Failed to fetch CV data: {e}", url=self._url) from e

        try:
            document = Document.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise FetchFailed(f"Malformed CV data: {e}", url=self._url) from e

        logger.debug("Fetched CV document from %s", self._url)
        return document

    async def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed HTTP client for %s", self._url)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

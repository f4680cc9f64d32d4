"""Document retrieval module for cvterm.

Public API:
    DocumentSource -- Abstract base class
    FetchFailed -- Raised when a retrieval does not complete
    HttpDocumentSource -- Fetches the document from a JSON endpoint
"""

from cvterm.source.base import DocumentSource, FetchFailed

__all__ = ["DocumentSource", "FetchFailed", "HttpDocumentSource"]


def __getattr__(name: str) -> type:
    """Lazy import for the HTTP implementation."""
    if name == "HttpDocumentSource":
        from cvterm.source.http_source import HttpDocumentSource
        return HttpDocumentSource
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

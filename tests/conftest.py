"""Shared test fixtures for the cvterm test suite.

Provides sample CV documents, a scriptable in-memory DocumentSource, a
manually advanced clock, and a cache/dispatcher wired to them.
"""

from __future__ import annotations

import copy

import pytest

from cvterm.cache.data_cache import DataCache
from cvterm.commands.dispatcher import Dispatcher
from cvterm.domain.models import Document
from cvterm.source.base import DocumentSource, FetchFailed


# ---------------------------------------------------------------------------
# Test Doubles
# ---------------------------------------------------------------------------


class FakeSource(DocumentSource):
    """Returns the configured document, or raises while ``failing`` is set."""

    def __init__(self, document: Document | None = None) -> None:
        self.document = document
        self.failing = False
        self.fetch_count = 0
        self.closed = False

    async def fetch(self) -> Document:
        self.fetch_count += 1
        if self.failing or self.document is None:
            raise FetchFailed("Failed to fetch CV data: 503", url="fake://cv", status_code=503)
        return self.document

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Monotonic clock in seconds, advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


# ---------------------------------------------------------------------------
# Document Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cv_json() -> dict:
    """A JSON Resume payload as served by the remote endpoint."""
    return {
        "basics": {
            "name": "Ada Lovelace",
            "label": "Software Engineer",
            "email": "ada@example.com",
            "summary": "Builds analytical engines.",
            "location": {"city": "London", "region": "England", "countryCode": "GB"},
            "profiles": [
                {"network": "GitHub", "username": "ada", "url": "https://github.com/ada"},
                {"network": "LinkedIn", "username": "ada", "url": "https://linkedin.com/in/ada"},
            ],
        },
        "work": [
            {
                "company": "Acme",
                "position": "Engineer",
                "startDate": "2020-01",
                "highlights": ["Shipped X"],
            },
            {
                "company": "Initech",
                "position": "Junior Engineer",
                "startDate": "2017-06",
                "endDate": "2019-12",
                "highlights": [],
            },
        ],
        "education": [
            {
                "institution": "University of London",
                "area": "Mathematics",
                "studyType": "BSc",
                "startDate": "2013",
                "endDate": "2016",
                "courses": ["Calculus", "Logic"],
            }
        ],
        "skills": [
            {"name": "Backend", "level": "Expert", "keywords": ["Python", "SQL"]},
            {"name": "Frontend", "level": "Intermediate", "keywords": ["TypeScript"]},
        ],
        "languages": [
            {"language": "English", "fluency": "Native"},
            {"language": "French", "fluency": "Conversational"},
        ],
        "interests": [
            {"name": "Music", "keywords": ["Piano"]},
            {"name": "Chess"},
        ],
        "projects": [
            {
                "name": "Engine",
                "description": "A difference engine simulator.",
                "highlights": ["Computes Bernoulli numbers"],
                "keywords": ["Python"],
                "url": "https://example.com/engine",
            }
        ],
        "meta": {"version": "1.0.0", "theme": "terminal"},
    }


@pytest.fixture
def sample_document(cv_json: dict) -> Document:
    return Document.model_validate(cv_json)


@pytest.fixture
def other_document(cv_json: dict) -> Document:
    """A second, distinguishable snapshot."""
    payload = copy.deepcopy(cv_json)
    payload["basics"]["name"] = "Charles Babbage"
    return Document.model_validate(payload)


# ---------------------------------------------------------------------------
# Component Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_source(sample_document: Document) -> FakeSource:
    return FakeSource(sample_document)


@pytest.fixture
def cache(fake_source: FakeSource, clock: FakeClock) -> DataCache:
    return DataCache(fake_source, ttl_ms=300_000, clock=clock)


@pytest.fixture
def dispatcher(cache: DataCache) -> Dispatcher:
    return Dispatcher(cache)


@pytest.fixture
def empty_source() -> FakeSource:
    """A source with nothing to serve; every fetch fails."""
    return FakeSource(None)


@pytest.fixture
def make_dispatcher(clock: FakeClock):
    """Build a dispatcher over a fresh cache serving the given document."""

    def _make(document: Document | None) -> tuple[Dispatcher, FakeSource]:
        source = FakeSource(document)
        return Dispatcher(DataCache(source, clock=clock)), source

    return _make

"""Tests for the DataCache freshness and stale-serve behavior."""

from __future__ import annotations

import asyncio

import pytest

from cvterm.cache.data_cache import DEFAULT_TTL_MS, CacheState, DataCache
from cvterm.domain.models import Document
from cvterm.source.base import FetchFailed


class TestDataCacheFreshness:
    @pytest.mark.asyncio
    async def test_first_get_fetches(self, cache: DataCache, fake_source, sample_document: Document) -> None:
        assert cache.state is CacheState.EMPTY
        document = await cache.get()
        assert document is sample_document
        assert fake_source.fetch_count == 1
        assert cache.state is CacheState.FRESH

    @pytest.mark.asyncio
    async def test_fresh_entry_served_without_fetch(self, cache: DataCache, fake_source, clock) -> None:
        first = await cache.get()
        clock.advance_ms(299_999)
        second = await cache.get()
        assert second is first
        assert fake_source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_age_equal_to_ttl_is_stale(self, cache: DataCache, fake_source, clock) -> None:
        await cache.get()
        clock.advance_ms(300_000)
        assert cache.state is CacheState.STALE
        await cache.get()
        assert fake_source.fetch_count == 2

    @pytest.mark.asyncio
    async def test_refresh_replaces_snapshot(
        self, cache: DataCache, fake_source, clock, other_document: Document
    ) -> None:
        await cache.get()
        fake_source.document = other_document
        clock.advance_ms(300_001)
        assert await cache.get() is other_document
        assert cache.status().age_ms == 0

    @pytest.mark.asyncio
    async def test_zero_ttl_always_fetches(self, fake_source, clock) -> None:
        cache = DataCache(fake_source, ttl_ms=0, clock=clock)
        await cache.get()
        await cache.get()
        assert fake_source.fetch_count == 2


class TestDataCacheFailures:
    @pytest.mark.asyncio
    async def test_stale_entry_served_on_fetch_failure(
        self, cache: DataCache, fake_source, clock
    ) -> None:
        original = await cache.get()
        fake_source.failing = True
        clock.advance_ms(600_000)
        assert await cache.get() is original
        assert fake_source.fetch_count == 2
        assert cache.state is CacheState.STALE

    @pytest.mark.asyncio
    async def test_stale_serve_is_logged(self, cache: DataCache, fake_source, clock, caplog) -> None:
        await cache.get()
        fake_source.failing = True
        clock.advance_ms(600_000)
        with caplog.at_level("WARNING", logger="cvterm.cache.data_cache"):
            await cache.get()
        assert "stale cache" in caplog.text

    @pytest.mark.asyncio
    async def test_failure_with_empty_cache_raises(self, empty_source, clock) -> None:
        cache = DataCache(empty_source, clock=clock)
        with pytest.raises(FetchFailed):
            await cache.get()
        assert cache.state is CacheState.EMPTY
        assert cache.status().cached is False

    @pytest.mark.asyncio
    async def test_recovers_after_failure(self, empty_source, clock, sample_document) -> None:
        cache = DataCache(empty_source, clock=clock)
        with pytest.raises(FetchFailed):
            await cache.get()
        empty_source.document = sample_document
        assert await cache.get() is sample_document


class TestDataCacheStatus:
    def test_empty_status(self, cache: DataCache, fake_source) -> None:
        status = cache.status()
        assert status.cached is False
        assert status.age_ms is None
        assert status.ttl_ms == 300_000
        assert fake_source.fetch_count == 0

    @pytest.mark.asyncio
    async def test_status_after_fetch(self, cache: DataCache, clock) -> None:
        await cache.get()
        clock.advance_ms(90_000)
        status = cache.status()
        assert status.cached is True
        assert status.age_ms == 90_000
        assert status.age_ms < status.ttl_ms

    @pytest.mark.asyncio
    async def test_status_never_fetches(self, cache: DataCache, fake_source, clock) -> None:
        await cache.get()
        clock.advance_ms(900_000)
        cache.status()
        assert fake_source.fetch_count == 1

    def test_default_ttl(self, fake_source) -> None:
        assert DataCache(fake_source).ttl_ms == DEFAULT_TTL_MS == 300_000


class TestDataCacheControl:
    @pytest.mark.asyncio
    async def test_reconfigure_keeps_entry(self, cache: DataCache, fake_source, clock) -> None:
        await cache.get()
        clock.advance_ms(120_000)
        cache.reconfigure(60_000)
        assert cache.ttl_ms == 60_000
        assert cache.status().cached is True
        assert cache.state is CacheState.STALE
        await cache.get()
        assert fake_source.fetch_count == 2

    def test_reconfigure_rejects_negative(self, cache: DataCache) -> None:
        with pytest.raises(ValueError):
            cache.reconfigure(-1)

    @pytest.mark.asyncio
    async def test_invalidate_empties_slot(self, cache: DataCache, fake_source) -> None:
        await cache.get()
        cache.invalidate()
        assert cache.state is CacheState.EMPTY
        await cache.get()
        assert fake_source.fetch_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_gets_share_one_fetch(self, cache: DataCache, fake_source) -> None:
        results = await asyncio.gather(*(cache.get() for _ in range(5)))
        assert fake_source.fetch_count == 1
        assert all(doc is results[0] for doc in results)

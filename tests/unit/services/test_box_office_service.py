"""
Tests du BoxOfficeService.

Verifie:
- Cache frais servi sans appel reseau
- Telechargement sur cache vide ou expire
- Repli sur l'entree perimee quand le telechargement echoue
- NoCacheAvailable sans aucune entree
- Un seul telechargement pour des appels concurrents
"""

import asyncio
from datetime import datetime, timezone

import pytest

from src.adapters.cache import InMemoryCollectionCache
from src.core.errors import FetchFailure, NoCacheAvailable
from src.services.box_office import (
    STALE_DATA_MESSAGE,
    BoxOfficeService,
    CollectionsResult,
    to_iso_timestamp,
)

URL = "https://www.sacnilk.com/news/bollywood"


@pytest.fixture
def cache(clock) -> InMemoryCollectionCache:
    return InMemoryCollectionCache(clock=clock)


@pytest.fixture
def service(mock_fetcher, mock_parser, cache) -> BoxOfficeService:
    return BoxOfficeService(fetcher=mock_fetcher, parser=mock_parser, cache=cache)


class TestGetCollections:
    """Tests du cycle cache / telechargement."""

    @pytest.mark.asyncio
    async def test_cold_cache_fetches_and_parses(self, service, mock_fetcher, mock_parser, clock):
        mock_fetcher.fetch.return_value = "<html>page</html>"

        result = await service.get_collections()

        mock_fetcher.fetch.assert_awaited_once()
        mock_parser.parse.assert_called_once_with("<html>page</html>")
        assert result.cached is False
        assert result.source == "Sacnilk.com"
        assert result.error is None
        assert result.last_updated == clock.now
        assert [r.title for r in result.records] == ["Jawan", "Pathaan", "Dunki"]

    @pytest.mark.asyncio
    async def test_fresh_cache_served_without_fetch(self, service, mock_fetcher, clock):
        first = await service.get_collections()
        clock.advance(hours=1)

        second = await service.get_collections()

        assert mock_fetcher.fetch.await_count == 1
        assert second.cached is True
        assert second.source is None
        assert second.last_updated == first.last_updated
        assert second.records == first.records

    @pytest.mark.asyncio
    async def test_expired_cache_triggers_new_fetch(self, service, mock_fetcher, clock):
        await service.get_collections()
        clock.advance(hours=7)

        result = await service.get_collections()

        assert mock_fetcher.fetch.await_count == 2
        assert result.cached is False
        assert result.last_updated == clock.now

    @pytest.mark.asyncio
    async def test_force_refresh_ignores_fresh_entry(self, service, mock_fetcher):
        await service.get_collections()

        result = await service.get_collections(force_refresh=True)

        assert mock_fetcher.fetch.await_count == 2
        assert result.cached is False

    @pytest.mark.asyncio
    async def test_empty_parse_is_cached(self, service, mock_fetcher, mock_parser):
        """Un tableau vide n'est pas une erreur et reste en cache."""
        mock_parser.parse.return_value = []

        first = await service.get_collections()
        second = await service.get_collections()

        assert first.records == ()
        assert second.cached is True
        assert mock_fetcher.fetch.await_count == 1


class TestFetchFailure:
    """Tests de la degradation quand la source est injoignable."""

    @pytest.mark.asyncio
    async def test_stale_entry_served_with_error(self, service, mock_fetcher, clock):
        first = await service.get_collections()
        clock.advance(hours=7)
        mock_fetcher.fetch.side_effect = FetchFailure(URL, "HTTP 503", status_code=503)

        result = await service.get_collections()

        assert result.cached is True
        assert result.error == STALE_DATA_MESSAGE
        assert result.last_updated == first.last_updated
        assert result.records == first.records

    @pytest.mark.asyncio
    async def test_no_cache_raises(self, service, mock_fetcher):
        mock_fetcher.fetch.side_effect = FetchFailure(URL, "timeout after 10.0s")

        with pytest.raises(NoCacheAvailable) as exc_info:
            await service.get_collections()

        assert "timeout after 10.0s" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FetchFailure)

    @pytest.mark.asyncio
    async def test_parser_not_called_on_failure(self, service, mock_fetcher, mock_parser):
        mock_fetcher.fetch.side_effect = FetchFailure(URL, "HTTP 500", status_code=500)

        with pytest.raises(NoCacheAvailable):
            await service.get_collections()

        mock_parser.parse.assert_not_called()


class TestSingleFlight:
    """Tests du regroupement des rafraichissements concurrents."""

    @pytest.mark.asyncio
    async def test_concurrent_calls_fetch_once(self, service, mock_fetcher):
        async def slow_fetch():
            await asyncio.sleep(0.01)
            return "<html></html>"

        mock_fetcher.fetch.side_effect = slow_fetch

        results = await asyncio.gather(*(service.get_collections() for _ in range(5)))

        assert mock_fetcher.fetch.await_count == 1
        assert sum(1 for r in results if not r.cached) == 1
        assert all(r.records == results[0].records for r in results)


class TestCollectionsResult:
    """Tests de la serialisation de la reponse."""

    def test_to_dict_after_fetch(self, box_office_records):
        result = CollectionsResult(
            records=tuple(box_office_records),
            cached=False,
            last_updated=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
            source="Sacnilk.com",
        )

        body = result.to_dict()

        assert body["cached"] is False
        assert body["lastUpdated"] == "2024-01-01T10:00:00.000Z"
        assert body["source"] == "Sacnilk.com"
        assert "error" not in body
        assert body["data"][0]["title"] == "Jawan"
        assert len(body["data"][0]["dailyCollections"]) == 30

    def test_to_dict_stale(self, box_office_records):
        result = CollectionsResult(
            records=tuple(box_office_records),
            cached=True,
            last_updated=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
            error=STALE_DATA_MESSAGE,
        )

        body = result.to_dict()

        assert body["error"] == STALE_DATA_MESSAGE
        assert "source" not in body

    def test_naive_datetime_treated_as_utc(self):
        assert to_iso_timestamp(datetime(2024, 5, 2, 8, 30, 15, 123456)) == (
            "2024-05-02T08:30:15.123Z"
        )

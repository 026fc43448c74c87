"""
Tests du MergerService.

Verifie:
- L'enrichissement des films du classement par leur fiche TMDB
- Les degradations quand une source ou les deux sont indisponibles
- La propagation des erreurs inattendues
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.core.errors import MetadataUnavailable, NoCacheAvailable
from src.services.box_office import BoxOfficeService, CollectionsResult
from src.services.merger import MergerService


@pytest.fixture
def mock_box_office(box_office_records) -> AsyncMock:
    """Mock du BoxOfficeService avec le classement type."""
    mock = AsyncMock(spec=BoxOfficeService)
    mock.get_collections.return_value = CollectionsResult(
        records=tuple(box_office_records),
        cached=False,
        last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc),
        source="Sacnilk.com",
    )
    return mock


@pytest.fixture
def merger(mock_box_office, mock_metadata_client) -> MergerService:
    return MergerService(box_office=mock_box_office, metadata_client=mock_metadata_client)


class TestMerge:
    """Tests de la fusion pure."""

    def test_keeps_box_office_order(self, merger, box_office_records, metadata_records):
        movies = merger.merge(box_office_records, metadata_records)

        assert [m.title for m in movies] == ["Jawan", "Pathaan", "Dunki"]
        assert [m.rank for m in movies] == [1, 2, 3]

    def test_enriches_matched_movies(self, merger, box_office_records, metadata_records):
        jawan, pathaan, _ = merger.merge(box_office_records, metadata_records)

        assert jawan.tmdb_id == 872906
        assert jawan.poster_path == "/jawan.jpg"
        assert jawan.vote_average == 7.0
        assert jawan.match_method == "exact"
        assert pathaan.tmdb_id == 864692
        assert pathaan.match_method == "token_set"

    def test_box_office_fields_kept(self, merger, box_office_records, metadata_records):
        jawan = merger.merge(box_office_records, metadata_records)[0]

        assert jawan.id == 1
        assert jawan.collection == "640.25 Cr"
        assert len(jawan.daily_collections) == 30

    def test_unmatched_movie_not_enriched(self, merger, box_office_records, metadata_records):
        dunki = merger.merge(box_office_records, metadata_records)[2]

        assert dunki.is_enriched is False
        assert dunki.poster_path is None
        assert dunki.match_confidence is None

    def test_empty_box_office_returns_metadata(self, merger, metadata_records):
        movies = merger.merge([], metadata_records)

        assert [m.id for m in movies] == [864692, 872906]
        assert all(m.rank is None and not m.has_box_office for m in movies)
        assert movies[1].revenue == 140000000
        assert [m.year for m in movies] == ["2023", "2023"]

    def test_both_empty(self, merger):
        assert merger.merge([], []) == []

    def test_no_metadata_keeps_box_office_fields(self, merger, box_office_records):
        movies = merger.merge(box_office_records, [])

        assert len(movies) == len(box_office_records)
        assert not any(m.is_enriched for m in movies)
        assert [m.collection for m in movies] == [r.collection for r in box_office_records]

    def test_threshold_applied(self, mock_box_office, mock_metadata_client, box_office_records, metadata_records):
        strict = MergerService(mock_box_office, mock_metadata_client, match_threshold=1.0)

        movies = strict.merge(box_office_records, metadata_records)

        assert movies[0].tmdb_id == 872906
        assert movies[1].tmdb_id == 864692  # token_set a 1.0
        assert movies[2].tmdb_id is None


class TestLoadMovies:
    """Tests de la recuperation parallele des deux sources."""

    @pytest.mark.asyncio
    async def test_both_sources_available(self, merger, mock_box_office, mock_metadata_client):
        movies = await merger.load_movies()

        mock_box_office.get_collections.assert_awaited_once()
        mock_metadata_client.discover_movies.assert_awaited_once()
        assert len(movies) == 3
        assert movies[0].is_enriched

    @pytest.mark.asyncio
    async def test_metadata_unavailable(self, merger, mock_metadata_client):
        mock_metadata_client.discover_movies.side_effect = MetadataUnavailable("TMDB down")

        movies = await merger.load_movies()

        assert [m.title for m in movies] == ["Jawan", "Pathaan", "Dunki"]
        assert not any(m.is_enriched for m in movies)

    @pytest.mark.asyncio
    async def test_box_office_unavailable(self, merger, mock_box_office):
        mock_box_office.get_collections.side_effect = NoCacheAvailable("source down")

        movies = await merger.load_movies()

        assert [m.tmdb_id for m in movies] == [864692, 872906]
        assert all(m.collection is None for m in movies)

    @pytest.mark.asyncio
    async def test_both_unavailable(self, merger, mock_box_office, mock_metadata_client):
        mock_box_office.get_collections.side_effect = NoCacheAvailable("source down")
        mock_metadata_client.discover_movies.side_effect = MetadataUnavailable("TMDB down")

        assert await merger.load_movies() == []

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self, merger, mock_metadata_client):
        mock_metadata_client.discover_movies.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await merger.load_movies()

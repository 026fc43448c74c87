"""
Fixtures pytest partagees pour les tests Boxoffice.

Ce module contient les fixtures communes utilisees dans les tests:
- Horloge manuelle pour le cache TTL
- Films du classement et fiches TMDB types
- Mocks des ports (IPageFetcher, ITableParser, IMetadataClient)
- Settings de test avec chemins temporaires
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Settings
from src.core.entities.box_office import BoxOfficeRecord
from src.core.entities.media import MetadataRecord
from src.core.ports.api_clients import IMetadataClient
from src.core.ports.box_office import IPageFetcher, ITableParser
from src.services.estimator import estimate_daily_collections


class ManualClock:
    """Horloge avancee a la main, injectee dans le cache."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> ManualClock:
    """Horloge fixee au 1er janvier 2024, 10h00 UTC."""
    return ManualClock(datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc))


def make_record(position: int, title: str, collection: str, year: str = "2023") -> BoxOfficeRecord:
    """BoxOfficeRecord avec sa courbe estimee."""
    return BoxOfficeRecord(
        id=position,
        rank=position,
        title=title,
        collection=collection,
        year=year,
        daily_collections=tuple(estimate_daily_collections(collection)),
    )


@pytest.fixture
def box_office_records() -> list[BoxOfficeRecord]:
    """Trois films du classement, dans l'ordre des rangs."""
    return [
        make_record(1, "Jawan", "640.25 Cr"),
        make_record(2, "Pathaan", "543.09 Cr"),
        make_record(3, "Dunki", "227.00 Cr"),
    ]


@pytest.fixture
def metadata_records() -> list[MetadataRecord]:
    """Fiches TMDB (ordre different du classement)."""
    return [
        MetadataRecord(
            id=864692,
            title="Pathaan (2023)",
            original_title="पठान",
            poster_path="/pathaan.jpg",
            vote_average=6.1,
            vote_count=400,
            release_date="2023-01-25",
            original_language="hi",
        ),
        MetadataRecord(
            id=872906,
            title="Jawan",
            original_title="जवान",
            poster_path="/jawan.jpg",
            vote_average=7.0,
            vote_count=500,
            release_date="2023-09-07",
            original_language="hi",
            revenue=140000000,
        ),
    ]


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """
    Mock de IPageFetcher.

    fetch() retourne une page vide par defaut; configurer return_value
    ou side_effect dans chaque test.
    """
    mock = AsyncMock(spec=IPageFetcher)
    mock.fetch.return_value = "<html></html>"
    mock.source_name = "Sacnilk.com"
    return mock


@pytest.fixture
def mock_parser(box_office_records: list[BoxOfficeRecord]) -> MagicMock:
    """Mock de ITableParser retournant les trois films types."""
    mock = MagicMock(spec=ITableParser)
    mock.parse.return_value = box_office_records
    return mock


@pytest.fixture
def mock_metadata_client(metadata_records: list[MetadataRecord]) -> AsyncMock:
    """Mock de IMetadataClient retournant les fiches types."""
    mock = AsyncMock(spec=IMetadataClient)
    mock.discover_movies.return_value = metadata_records
    mock.get_details.return_value = None
    mock.search.return_value = []
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec un fichier de log temporaire."""
    return Settings(
        tmdb_api_key="test_api_key",
        cache_ttl_hours=6,
        log_file=tmp_path / "test.log",
    )

"""
Service du classement box-office.

Orchestre cache, telechargement et parsing:

1. Entree fraiche en cache -> servie sans appel reseau (cached=True)
2. Sinon telechargement + parsing, ecriture en cache (cached=False)
3. Echec du telechargement -> derniere entree servie quel que soit son age
   (cached=True, error renseigne)
4. Echec sans aucune entree -> NoCacheAvailable

Les rafraichissements concurrents sur cache froid sont regroupes par un
verrou asyncio: un seul telechargement, les autres appelants relisent le
cache une fois le verrou obtenu.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from loguru import logger

from src.core.entities.box_office import BoxOfficeRecord
from src.core.errors import FetchFailure, NoCacheAvailable
from src.core.ports.box_office import IPageFetcher, ITableParser
from src.core.ports.cache import CacheEntry, ICollectionCache

STALE_DATA_MESSAGE = "Using cached data due to scraping error"


def to_iso_timestamp(value: datetime) -> str:
    """Horodatage ISO-8601 en UTC a la milliseconde ("2024-01-01T10:00:00.000Z")."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class CollectionsResult:
    """
    Resultat d'une lecture du classement.

    Attributes:
        records: Films du classement
        cached: True si servi depuis le cache (frais ou perime)
        last_updated: Instant de capture des donnees
        source: Nom de la source, uniquement apres un telechargement
        error: Message de degradation quand une entree perimee est servie
    """

    records: tuple[BoxOfficeRecord, ...]
    cached: bool
    last_updated: datetime
    source: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "data": [record.to_dict() for record in self.records],
            "cached": self.cached,
            "lastUpdated": to_iso_timestamp(self.last_updated),
        }
        if self.source is not None:
            body["source"] = self.source
        if self.error is not None:
            body["error"] = self.error
        return body


class BoxOfficeService:
    """
    Lecture du classement avec cache TTL et repli sur donnees perimees.

    Example:
        service = BoxOfficeService(fetcher, parser, cache)
        result = await service.get_collections()
        for record in result.records:
            print(record.rank, record.title, record.collection)
    """

    def __init__(
        self,
        fetcher: IPageFetcher,
        parser: ITableParser,
        cache: ICollectionCache,
    ) -> None:
        self._fetcher = fetcher
        self._parser = parser
        self._cache = cache
        self._refresh_lock = asyncio.Lock()

    @staticmethod
    def _from_cache(entry: CacheEntry) -> CollectionsResult:
        return CollectionsResult(
            records=entry.payload,
            cached=True,
            last_updated=entry.captured_at,
        )

    async def get_collections(self, force_refresh: bool = False) -> CollectionsResult:
        """
        Retourne le classement, depuis le cache si possible.

        Args:
            force_refresh: Ignore une entree fraiche et retelecharge la page

        Returns:
            CollectionsResult

        Raises:
            NoCacheAvailable: Telechargement en echec et cache vide
        """
        if not force_refresh:
            entry = self._cache.read()
            if entry is not None:
                logger.debug("Classement servi depuis le cache", count=len(entry.payload))
                return self._from_cache(entry)

        async with self._refresh_lock:
            # Un autre appelant a pu rafraichir pendant l'attente du verrou
            if not force_refresh:
                entry = self._cache.read()
                if entry is not None:
                    return self._from_cache(entry)

            return await self._refresh()

    async def _refresh(self) -> CollectionsResult:
        logger.info("Rafraichissement du classement", source=self._fetcher.source_name)
        try:
            html = await self._fetcher.fetch()
        except FetchFailure as e:
            stale = self._cache.read_stale()
            if stale is None:
                logger.error("Echec du telechargement sans cache de repli", error=str(e))
                raise NoCacheAvailable(str(e)) from e

            logger.warning(
                "Echec du telechargement, donnees perimees servies",
                error=str(e),
                captured_at=to_iso_timestamp(stale.captured_at),
            )
            return CollectionsResult(
                records=stale.payload,
                cached=True,
                last_updated=stale.captured_at,
                error=STALE_DATA_MESSAGE,
            )

        records = self._parser.parse(html)
        entry = self._cache.write(records)
        logger.info("Classement mis en cache", count=len(entry.payload))

        return CollectionsResult(
            records=entry.payload,
            cached=False,
            last_updated=entry.captured_at,
            source=self._fetcher.source_name,
        )

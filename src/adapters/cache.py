"""
Cache en memoire du classement box-office.

Un seul emplacement pour tout le processus, avec un TTL fixe (6 heures par
defaut). Le cache est instancie une fois par le Container et injecte dans
les services: aucune variable de module.

Etats:
    EMPTY --write--> FRESH --(TTL ecoule)--> STALE --write--> FRESH

L'entree STALE n'est servie que par read_stale(), quand le
rafraichissement lui-meme echoue. Pas de verrou: le dernier write gagne.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from src.core.entities.box_office import BoxOfficeRecord
from src.core.ports.cache import CacheEntry, ICollectionCache
from src.utils.constants import CACHE_TTL_HOURS


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCollectionCache(ICollectionCache):
    """
    Cache a emplacement unique avec TTL.

    Attributes:
        ttl: Duree de fraicheur d'une entree

    Example:
        cache = InMemoryCollectionCache(ttl=timedelta(hours=6))
        cache.write(records)
        entry = cache.read()         # entree fraiche ou None
        fallback = cache.read_stale()  # entree quel que soit son age
    """

    def __init__(
        self,
        ttl: timedelta = timedelta(hours=CACHE_TTL_HOURS),
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Initialise un cache vide.

        Args:
            ttl: Duree de fraicheur
            clock: Source de l'heure courante (injectable pour les tests)
        """
        self.ttl = ttl
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

    def read(self) -> Optional[CacheEntry]:
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.captured_at < self.ttl:
            return entry
        return None

    def write(self, payload: Sequence[BoxOfficeRecord]) -> CacheEntry:
        entry = CacheEntry(payload=tuple(payload), captured_at=self._clock())
        self._entry = entry
        return entry

    def read_stale(self) -> Optional[CacheEntry]:
        return self._entry

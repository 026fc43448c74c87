"""
Interface port pour le cache du classement box-office.

Cache à un seul emplacement : read() ne retourne que des données fraîches,
read_stale() retourne la dernière écriture quel que soit son âge et ne sert
que de repli quand le rafraîchissement échoue.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from src.core.entities.box_office import BoxOfficeRecord


@dataclass(frozen=True)
class CacheEntry:
    """
    Contenu du cache.

    Attributs :
        payload : Films du classement, dans l'ordre du document
        captured_at : Instant (UTC) de l'écriture
    """

    payload: tuple[BoxOfficeRecord, ...]
    captured_at: datetime


class ICollectionCache(ABC):
    """Cache du classement box-office."""

    @abstractmethod
    def read(self) -> Optional[CacheEntry]:
        """Retourne l'entrée si elle est encore fraîche, None sinon (MISS)."""
        ...

    @abstractmethod
    def write(self, payload: Sequence[BoxOfficeRecord]) -> CacheEntry:
        """Remplace l'entrée et réinitialise son horodatage."""
        ...

    @abstractmethod
    def read_stale(self) -> Optional[CacheEntry]:
        """Retourne l'entrée quel que soit son âge, None si jamais écrite (EMPTY)."""
        ...

"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour l'API de
métadonnées externe. L'implémentation concrète (TMDB) vit dans
adapters/api/tmdb_client.py.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.media import MetadataRecord


class IMetadataClient(ABC):
    """
    Interface de base pour l'API de métadonnées de films.

    Trois opérations : découverte par langue et date de sortie,
    lecture par identifiant, recherche par titre.
    """

    @abstractmethod
    async def discover_movies(self) -> list[MetadataRecord]:
        """
        Découvre les films de la langue configurée.

        Retourne :
            Liste de MetadataRecord, les films avec recettes connues en tête

        Lève :
            MetadataUnavailable : si l'API échoue
        """
        ...

    @abstractmethod
    async def get_details(self, movie_id: int) -> Optional[MetadataRecord]:
        """
        Récupère les métadonnées d'un film.

        Retourne :
            MetadataRecord, ou None si le film est inconnu
        """
        ...

    @abstractmethod
    async def search(self, query: str) -> list[MetadataRecord]:
        """Recherche des films par titre."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...

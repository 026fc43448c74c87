"""
Service des vues client: classement, fiche, comparaison, recherche.

Les vues sont construites a partir de la liste fusionnee
(MergerService) et de l'API de metadonnees. Le rendu (pages, graphiques)
reste cote navigateur.
"""

from typing import Optional

from loguru import logger

from src.core.entities.box_office import MergedMovie
from src.core.entities.media import MetadataRecord
from src.core.ports.api_clients import IMetadataClient
from src.services.merger import MergerService
from src.utils.constants import (
    BUDGET_TO_TOTAL_MULTIPLIER,
    DEFAULT_DETAIL_TOTAL_CRORES,
    DEFAULT_ESTIMATED_TOTAL_CRORES,
    ESTIMATED_BUDGET_SHARE,
    VOTES_PER_ESTIMATED_CRORE,
)
from src.utils.helpers import parse_amount, usd_to_crores


def parse_movie_ids(raw: Optional[str]) -> list[int]:
    """
    Lit une liste d'identifiants separes par des virgules ("12,5,7").

    Les elements non entiers sont ignores, l'ordre est conserve.
    """
    if not raw:
        return []
    ids = []
    for part in raw.split(","):
        part = part.strip()
        try:
            ids.append(int(part))
        except ValueError:
            continue
    return ids


def estimate_total_crores(movie: MergedMovie) -> float:
    """
    Total estime d'un film en crores, pour les comparaisons.

    Ordre de priorite:
    1. Collection scrapee ("917.00 Cr")
    2. Recettes TMDB converties (USD -> crores)
    3. Budget TMDB converti x 2.5
    4. Nombre de votes TMDB / 100
    5. Valeur par defaut (100 crores)
    """
    if movie.collection:
        total = parse_amount(movie.collection)
        if total > 0:
            return total
    if movie.revenue and movie.revenue > 0:
        return usd_to_crores(movie.revenue)
    if movie.budget and movie.budget > 0:
        return usd_to_crores(movie.budget) * BUDGET_TO_TOTAL_MULTIPLIER
    if movie.vote_count:
        return movie.vote_count / VOTES_PER_ESTIMATED_CRORE
    return DEFAULT_ESTIMATED_TOTAL_CRORES


def estimate_budget_crores(movie: MergedMovie) -> float:
    """Budget en crores: budget TMDB converti, sinon 40 % du total estime."""
    if movie.budget and movie.budget > 0:
        return usd_to_crores(movie.budget)
    return estimate_total_crores(movie) * ESTIMATED_BUDGET_SHARE


def detail_total_crores(record: MetadataRecord) -> float:
    """Total servant a la courbe d'une fiche film: recettes converties, sinon 500 crores."""
    return usd_to_crores(record.revenue) or DEFAULT_DETAIL_TOTAL_CRORES


def profit_usd(record: MetadataRecord) -> Optional[int]:
    """Recettes moins budget (USD), None si l'un des deux est inconnu."""
    if not record.revenue or not record.budget:
        return None
    return record.revenue - record.budget


class CatalogService:
    """
    Operations exposees au front end.

    Example:
        catalog = CatalogService(merger, tmdb_client)
        movies = await catalog.compare("1,2,3")
    """

    def __init__(self, merger: MergerService, metadata_client: IMetadataClient) -> None:
        self._merger = merger
        self._metadata_client = metadata_client

    async def rankings(self) -> list[MergedMovie]:
        """Classement fusionne, dans l'ordre des rangs."""
        return await self._merger.load_movies()

    async def movie_detail(self, movie_id: int) -> Optional[MetadataRecord]:
        """Fiche TMDB complete d'un film (recettes et budget inclus)."""
        return await self._metadata_client.get_details(movie_id)

    async def compare(self, raw_ids: Optional[str]) -> list[MergedMovie]:
        """
        Selectionne les films a comparer.

        Un identifiant correspond a l'id du classement ou a l'id TMDB.
        Les identifiants inconnus sont ignores; l'ordre demande est conserve.

        Args:
            raw_ids: Parametre de requete "movies" ("1,2,3")

        Returns:
            Films selectionnes
        """
        ids = parse_movie_ids(raw_ids)
        if not ids:
            return []

        movies = await self._merger.load_movies()
        selected = []
        for movie_id in ids:
            found = next(
                (m for m in movies if m.id == movie_id or m.tmdb_id == movie_id),
                None,
            )
            if found is not None:
                selected.append(found)

        logger.debug("Comparaison", requested=len(ids), found=len(selected))
        return selected

    async def search(self, query: str) -> list[MetadataRecord]:
        """Recherche TMDB par titre (liste vide pour une requete vide)."""
        query = query.strip()
        if not query:
            return []
        return await self._metadata_client.search(query)

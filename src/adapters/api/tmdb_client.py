"""
Client TMDB pour la decouverte et la recherche de films indiens.

Implemente l'interface IMetadataClient pour TMDB (The Movie Database).
Une seule tentative par requete: les echecs HTTP sont convertis en
MetadataUnavailable, que le merger absorbe en servant le classement seul.

Usage:
    client = TMDBClient(api_key="your_key")
    movies = await client.discover_movies()
    details = await client.get_details(19995)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.core.entities.media import MetadataRecord
from src.core.errors import MetadataUnavailable
from src.core.ports.api_clients import IMetadataClient
from src.utils.constants import (
    TMDB_DISCOVER_LANGUAGE,
    TMDB_DISCOVER_PAGES,
    TMDB_DISCOVER_RELEASE_DATE_GTE,
    TMDB_DISCOVER_SORT,
    TMDB_SEARCH_LANGUAGE,
)


def _popularity_key(record: MetadataRecord) -> tuple[bool, float]:
    """Films avec recettes connues en tete, puis par vote_count x vote_average."""
    weight = (record.vote_count or 0) * (record.vote_average or 0.0)
    return (not record.revenue, -weight)


class TMDBClient(IMetadataClient):
    """
    Client API TMDB pour les metadonnees de films.

    Implemente IMetadataClient avec:
    - Decouverte des films par langue originale et date de sortie
    - Recuperation des details d'un film
    - Recherche de films par titre

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters)

    Example:
        client = TMDBClient(api_key="xxx")
        movies = await client.discover_movies()
        print(movies[0].title, movies[0].vote_average)
        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

    def __init__(
        self,
        api_key: Optional[str],
        language: str = TMDB_DISCOVER_LANGUAGE,
        release_date_gte: str = TMDB_DISCOVER_RELEASE_DATE_GTE,
        pages: int = TMDB_DISCOVER_PAGES,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4), None si absente
            language: Langue originale des films decouverts
            release_date_gte: Date de sortie minimale (YYYY-MM-DD)
            pages: Nombre de pages de decouverte a parcourir
            timeout: Timeout des requetes en secondes
        """
        self._api_key = api_key
        self.language = language
        self.release_date_gte = release_date_gte
        self.pages = pages
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer

        Raises:
            MetadataUnavailable: Si aucune cle API n'est configuree
        """
        if not self._api_key:
            raise MetadataUnavailable("TMDB API key is not configured")

        if self._client is None or self._client.is_closed:
            # Detecter le type de cle : v3 (32 hex) vs v4 (long JWT)
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    def poster_url(self, record: MetadataRecord) -> Optional[str]:
        """URL complete du poster d'un film, None s'il n'en a pas."""
        if not record.poster_path:
            return None
        return f"{self.TMDB_IMAGE_BASE_URL}{record.poster_path}"

    @staticmethod
    def _to_record(item: dict[str, Any]) -> MetadataRecord:
        localized_title = item.get("title") or ""
        original_title = item.get("original_title")
        return MetadataRecord(
            id=int(item["id"]),
            title=localized_title or original_title or "",
            original_title=original_title,
            poster_path=item.get("poster_path"),
            backdrop_path=item.get("backdrop_path"),
            overview=item.get("overview"),
            original_language=item.get("original_language"),
            vote_average=item.get("vote_average"),
            vote_count=item.get("vote_count"),
            release_date=item.get("release_date") or None,
            revenue=item.get("revenue"),
            budget=item.get("budget"),
            popularity=item.get("popularity"),
        )

    @classmethod
    def _to_records(cls, items: Any, url: str) -> list[MetadataRecord]:
        """Convertit une liste de resultats; un resultat malforme rend la reponse inutilisable."""
        try:
            return [cls._to_record(item) for item in items]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Reponse TMDB malformee", url=url, error=str(e))
            raise MetadataUnavailable(f"TMDB response {url} is malformed: {e}") from e

    @staticmethod
    def _decode(response: httpx.Response, url: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Reponse TMDB illisible", url=url, error=str(e))
            raise MetadataUnavailable(f"TMDB response {url} is not JSON: {e}") from e
        if not isinstance(data, dict):
            raise MetadataUnavailable(f"TMDB response {url} is not a JSON object")
        return data

    async def _get(self, url: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        client = self._get_client()
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Echec de l'appel TMDB", url=url, error=str(e))
            raise MetadataUnavailable(f"TMDB request {url} failed: {e}") from e
        return self._decode(response, url)

    async def discover_movies(self) -> list[MetadataRecord]:
        """
        Decouvre les films de la langue configuree, page par page.

        Returns:
            Liste triee: recettes connues en tete, puis vote_count x vote_average

        Raises:
            MetadataUnavailable: Si une page echoue ou si la cle est absente
        """
        records: list[MetadataRecord] = []
        for page in range(1, self.pages + 1):
            data = await self._get(
                "/discover/movie",
                params={
                    "with_original_language": self.language,
                    "sort_by": TMDB_DISCOVER_SORT,
                    "primary_release_date.gte": self.release_date_gte,
                    "page": page,
                },
            )
            records.extend(self._to_records(data.get("results", []), "/discover/movie"))
            if page >= data.get("total_pages", page):
                break

        logger.debug("Films decouverts sur TMDB", count=len(records))
        return sorted(records, key=_popularity_key)

    async def get_details(self, movie_id: int) -> Optional[MetadataRecord]:
        """
        Recupere les details complets d'un film.

        Args:
            movie_id: ID TMDB du film

        Returns:
            MetadataRecord (avec revenue et budget), ou None si non trouve
        """
        url = f"/movie/{movie_id}"
        client = self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise MetadataUnavailable(f"TMDB details {movie_id} failed: {e}") from e
        except httpx.HTTPError as e:
            raise MetadataUnavailable(f"TMDB details {movie_id} failed: {e}") from e

        return self._to_records([self._decode(response, url)], url)[0]

    async def search(self, query: str) -> list[MetadataRecord]:
        """
        Recherche des films par titre.

        Args:
            query: Titre du film a rechercher

        Returns:
            Liste de MetadataRecord (vide si aucun resultat)
        """
        data = await self._get(
            "/search/movie",
            params={"query": query, "language": TMDB_SEARCH_LANGUAGE},
        )
        return self._to_records(data.get("results", []), "/search/movie")

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

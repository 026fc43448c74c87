"""
Recuperation de la page de classement box-office (Sacnilk).

Une seule requete GET par appel, avec timeout borne et en-tete
User-Agent de navigateur. Aucune relance: toute erreur reseau, tout
timeout ou statut non-2xx est converti en FetchFailure.

Usage:
    fetcher = SacnilkFetcher()
    html = await fetcher.fetch()
    await fetcher.close()
"""

from typing import Optional

import httpx
from loguru import logger

from src.core.errors import FetchFailure
from src.core.ports.box_office import IPageFetcher
from src.utils.constants import (
    BROWSER_USER_AGENT,
    FETCH_TIMEOUT_SECONDS,
    SACNILK_SOURCE_NAME,
    SACNILK_URL,
)


class SacnilkFetcher(IPageFetcher):
    """
    Client HTTP de la page "100 crores club" de Sacnilk.

    Attributes:
        url: URL de la page scrapee
        timeout: Timeout total de la requete en secondes
    """

    def __init__(
        self,
        url: str = SACNILK_URL,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        user_agent: str = BROWSER_USER_AGENT,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._user_agent = user_agent
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self._client

    @property
    def source_name(self) -> str:
        return SACNILK_SOURCE_NAME

    async def fetch(self) -> str:
        """
        Telecharge la page de classement.

        Returns:
            Corps HTML de la reponse

        Raises:
            FetchFailure: Erreur reseau, timeout ou statut non-2xx
        """
        client = self._get_client()
        logger.debug("Telechargement de la page box-office", url=self.url)

        try:
            response = await client.get(self.url)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchFailure(self.url, f"timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise FetchFailure(
                self.url,
                f"HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchFailure(self.url, str(e) or type(e).__name__) from e

        return response.text

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

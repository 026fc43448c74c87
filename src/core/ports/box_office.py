"""
Interfaces ports pour la source box-office.

La récupération du document (IPageFetcher) et son interprétation
(ITableParser) sont séparées : un changement de structure de la page
ne touche que le parser.
"""

from abc import ABC, abstractmethod

from src.core.entities.box_office import BoxOfficeRecord


class IPageFetcher(ABC):
    """Récupère le document HTML de la source box-office."""

    @abstractmethod
    async def fetch(self) -> str:
        """
        Télécharge la page.

        Retourne :
            Corps HTML de la réponse

        Lève :
            FetchFailure : erreur réseau, timeout ou statut non-2xx
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Nom de la source affiché aux clients (ex: 'Sacnilk.com')."""
        ...


class ITableParser(ABC):
    """Extrait les lignes du classement depuis le document HTML."""

    @abstractmethod
    def parse(self, html: str) -> list[BoxOfficeRecord]:
        """
        Parse le document.

        Retourne :
            Liste des films en ordre du document (vide si aucune ligne valide)
        """
        ...

"""
Exceptions du domaine box-office.

Taxonomie:
- FetchFailure : la source box-office est injoignable (reseau, timeout, non-2xx)
- MetadataUnavailable : l'API de metadonnees a echoue
- NoCacheAvailable : echec du rafraichissement sans aucune donnee en cache

Un tableau vide apres parsing n'est pas une erreur (liste vide + warning).
"""

from typing import Optional


class BoxOfficeError(Exception):
    """Exception de base de l'application."""


class FetchFailure(BoxOfficeError):
    """
    Exception levee quand la page box-office ne peut pas etre recuperee.

    Attributes:
        url: URL demandee
        status_code: Code HTTP si une reponse a ete recue, None sinon
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class MetadataUnavailable(BoxOfficeError):
    """Exception levee quand l'API de metadonnees ne repond pas ou est desactivee."""


class NoCacheAvailable(BoxOfficeError):
    """Exception levee quand le rafraichissement echoue et que le cache est vide."""

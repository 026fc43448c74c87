"""
Couche services (cas d'utilisation).

- estimator : courbe journaliere estimee a partir d'un total
- box_office : classement avec cache TTL, repli perime et rafraichissement unique
- matcher : correspondance des titres scrapes avec TMDB
- merger : fusion des deux sources
- catalog : vues client (classement, fiche, comparaison, recherche)
"""

from src.services.box_office import BoxOfficeService, CollectionsResult
from src.services.catalog import CatalogService
from src.services.estimator import estimate_daily_collections
from src.services.matcher import TitleMatcher
from src.services.merger import MergerService

__all__ = [
    "estimate_daily_collections",
    "BoxOfficeService",
    "CollectionsResult",
    "TitleMatcher",
    "MergerService",
    "CatalogService",
]

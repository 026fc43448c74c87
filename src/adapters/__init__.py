"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- scraping/ : Téléchargement et parsing de la page Sacnilk (httpx + BeautifulSoup)
- api/ : Client de l'API de métadonnées (TMDB)
- cache : Cache mémoire à emplacement unique
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.api.tmdb_client import TMDBClient
from src.adapters.cache import InMemoryCollectionCache
from src.adapters.scraping import BoxOfficeTableParser, SacnilkFetcher

__all__ = [
    "TMDBClient",
    "InMemoryCollectionCache",
    "BoxOfficeTableParser",
    "SacnilkFetcher",
]

"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports source box-office :
- IPageFetcher : Téléchargement de la page de classement
- ITableParser : Extraction des lignes du tableau

Port cache :
- ICollectionCache : Cache à emplacement unique avec TTL
- CacheEntry : Contenu du cache horodaté

Port client API :
- IMetadataClient : Interface de l'API de métadonnées de films
"""

from src.core.ports.api_clients import IMetadataClient
from src.core.ports.box_office import IPageFetcher, ITableParser
from src.core.ports.cache import CacheEntry, ICollectionCache

__all__ = [
    # Source box-office
    "IPageFetcher",
    "ITableParser",
    # Cache
    "CacheEntry",
    "ICollectionCache",
    # Client API
    "IMetadataClient",
]

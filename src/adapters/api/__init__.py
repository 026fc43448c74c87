"""
Client API externe pour l'enrichissement des metadonnees.

- TMDB: The Movie Database (posters, notes, dates de sortie, recettes)

Le client implemente IMetadataClient defini dans core/ports/api_clients.py.
"""

from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "TMDBClient",
]

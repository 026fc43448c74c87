"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le cache du classement est un Singleton: un seul emplacement par processus,
partage par toutes les requetes.
"""

from datetime import timedelta

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBClient
from .adapters.cache import InMemoryCollectionCache
from .adapters.scraping.sacnilk_fetcher import SacnilkFetcher
from .adapters.scraping.table_parser import BoxOfficeTableParser
from .config import Settings
from .services.box_office import BoxOfficeService
from .services.catalog import CatalogService
from .services.merger import MergerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        merger = container.merger_service()
        movies = await merger.load_movies()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache du classement - Singleton (un seul slot par processus)
    collection_cache = providers.Singleton(
        InMemoryCollectionCache,
        ttl=providers.Factory(timedelta, hours=config.provided.cache_ttl_hours),
    )

    # Adapters source box-office
    page_fetcher = providers.Singleton(
        SacnilkFetcher,
        url=config.provided.box_office_url,
        timeout=config.provided.fetch_timeout,
        user_agent=config.provided.user_agent,
    )
    table_parser = providers.Singleton(
        BoxOfficeTableParser,
        max_records=config.provided.max_records,
    )

    # Client API - Singleton avec api_key depuis config
    # Si api_key est None, discover/search levent MetadataUnavailable
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.tmdb_language,
        release_date_gte=config.provided.tmdb_release_date_gte,
        pages=config.provided.tmdb_pages,
    )

    # Services - Singletons (le verrou de rafraichissement doit etre partage)
    box_office_service = providers.Singleton(
        BoxOfficeService,
        fetcher=page_fetcher,
        parser=table_parser,
        cache=collection_cache,
    )
    merger_service = providers.Singleton(
        MergerService,
        box_office=box_office_service,
        metadata_client=tmdb_client,
        match_threshold=config.provided.match_threshold,
    )
    catalog_service = providers.Singleton(
        CatalogService,
        merger=merger_service,
        metadata_client=tmdb_client,
    )

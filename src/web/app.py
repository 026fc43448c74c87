"""
Application FastAPI de Boxoffice.

Initialise l'application web avec le Container DI et monte les routes JSON
consommées par le front end.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from ..logging_config import ensure_logging
from .deps import APP_VERSION
from .routes.catalog import router as catalog_router
from .routes.movies import router as movies_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Initialise le Container DI et le logging au démarrage, ferme les clients
    HTTP à l'arrêt. uvicorn peut importer l'application sans passer par
    main() (worker --reload): le logging est alors configuré ici.
    """
    container = getattr(app.state, "container", None) or Container()
    app.state.container = container
    ensure_logging(container.config())
    logger.info("Démarrage de l'API Boxoffice", version=APP_VERSION)
    yield
    await container.page_fetcher().close()
    await container.tmdb_client().close()


app = FastAPI(title="Boxoffice", version=APP_VERSION, lifespan=lifespan)

# Routes ("/api/movies" avant "/api/movies/{movie_id}")
app.include_router(movies_router)
app.include_router(catalog_router)

"""
Routes des vues client (classement fusionné, fiche film, comparaison, recherche).

Les données sont servies en JSON; le rendu est fait par le front end.
"""

from typing import Any, Optional

from fastapi import APIRouter, Query, Request
from loguru import logger

from ...core.entities.box_office import MergedMovie
from ...core.errors import MetadataUnavailable
from ...services.catalog import (
    detail_total_crores,
    estimate_budget_crores,
    estimate_total_crores,
    profit_usd,
)
from ...services.estimator import estimate_daily_collections
from ...utils.helpers import format_crores, usd_to_crores
from ..deps import get_container, json_response

router = APIRouter(prefix="/api")


def _comparison_row(movie: MergedMovie) -> dict[str, Any]:
    row = movie.to_dict()
    row["estimatedTotalCrores"] = round(estimate_total_crores(movie), 2)
    row["estimatedBudgetCrores"] = round(estimate_budget_crores(movie), 2)
    return row


@router.get("/rankings")
async def rankings(request: Request):
    """Classement box-office enrichi des métadonnées TMDB."""
    movies = await get_container(request).catalog_service().rankings()
    return json_response({"data": [movie.to_dict() for movie in movies]})


@router.get("/movies/{movie_id}")
async def movie_detail(request: Request, movie_id: int):
    """
    Fiche TMDB d'un film, avec recettes, budget et profit convertis en crores
    et une courbe journalière estimée (500 crores si les recettes sont inconnues).
    """
    container = get_container(request)
    try:
        record = await container.catalog_service().movie_detail(movie_id)
    except MetadataUnavailable as e:
        logger.warning("Fiche film indisponible", movie_id=movie_id, error=str(e))
        return json_response({"error": "Movie details unavailable", "message": str(e)}, 503)

    if record is None:
        return json_response({"error": f"Movie {movie_id} not found"}, 404)

    body = record.to_dict()
    body["poster_url"] = container.tmdb_client().poster_url(record)
    body["revenue_display"] = format_crores(record.revenue)
    body["budget_display"] = format_crores(record.budget)
    profit = profit_usd(record)
    body["profit_display"] = "N/A" if profit is None else f"₹{usd_to_crores(profit):.2f} Cr"
    body["estimatedDailyCollections"] = [
        point.to_dict() for point in estimate_daily_collections(detail_total_crores(record))
    ]
    return json_response(body)


@router.get("/compare")
async def compare(request: Request, movies: Optional[str] = Query(default=None)):
    """Films sélectionnés par ?movies=1,2,3 (id du classement ou id TMDB)."""
    selected = await get_container(request).catalog_service().compare(movies)
    return json_response({"data": [_comparison_row(movie) for movie in selected]})


@router.get("/search")
async def search(request: Request, q: str = Query(default="")):
    """Recherche TMDB par titre (liste vide si l'API est indisponible)."""
    try:
        results = await get_container(request).catalog_service().search(q)
    except MetadataUnavailable as e:
        logger.warning("Recherche TMDB indisponible", query=q, error=str(e))
        results = []
    return json_response({"data": [record.to_dict() for record in results]})

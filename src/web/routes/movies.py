"""
Route du classement box-office scrapé.

GET /api/movies retourne le classement (cache 6h). Si le rafraîchissement
échoue, la dernière version en cache est servie avec un champ "error";
sans cache, la route répond 500.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response
from loguru import logger

from ...core.errors import NoCacheAvailable
from ..deps import CORS_HEADERS, get_container, json_response

router = APIRouter(prefix="/api")


@router.options("/movies")
async def movies_preflight() -> Response:
    """Réponse au preflight CORS."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.get("/movies")
async def list_movies(request: Request):
    """Classement box-office avec courbes journalières estimées."""
    service = get_container(request).box_office_service()
    try:
        result = await service.get_collections()
    except NoCacheAvailable as e:
        logger.error("Classement indisponible", error=str(e))
        return json_response(
            {"error": "Failed to fetch box office data", "message": str(e)},
            status_code=500,
        )

    return json_response(result.to_dict())

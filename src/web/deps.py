"""
Dépendances partagées de l'application web.

Fournit l'accès au Container DI, les en-têtes CORS des réponses JSON
et la version de l'application.
"""

import tomllib
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from ..container import Container

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

# Le front end est servi depuis une autre origine
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _read_version() -> str:
    """Version lue depuis pyproject.toml (0.0.0 si absent, ex: paquet installé)."""
    pyproject = _PROJECT_ROOT / "pyproject.toml"
    if not pyproject.exists():
        return "0.0.0"
    with open(pyproject, "rb") as f:
        return tomllib.load(f)["project"]["version"]


APP_VERSION = _read_version()


def get_container(request: Request) -> Container:
    """Container DI initialisé par le lifespan de l'application."""
    return request.app.state.container


def json_response(body: Any, status_code: int = 200) -> JSONResponse:
    """Réponse JSON avec les en-têtes CORS."""
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)

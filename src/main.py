"""
Point d'entrée CLI de Boxoffice.

Configure le logging depuis les Settings, puis expose les commandes:
- rankings / compare / curve : classement, comparaison, courbe estimée
- info / version : configuration et version
- serve : API JSON (uvicorn)
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import compare, curve, rankings
from .container import Container
from .logging_config import configure_logging, console_level, set_console_level
from .web.deps import APP_VERSION

app = typer.Typer(
    name="boxoffice",
    help="Tableau de bord box-office des films indiens",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Boxoffice - classement box-office Sacnilk enrichi par TMDB."""
    level = console_level(verbose, quiet)
    if level is not None:
        set_console_level(level)


app.command()(rankings)
app.command()(compare)
app.command()(curve)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    rows = [
        ("Source box-office", config.box_office_url),
        ("Timeout", f"{config.fetch_timeout}s"),
        ("Cache", f"{config.cache_ttl_hours}h"),
        ("Films max", str(config.max_records)),
        ("API TMDB", "activée" if config.tmdb_enabled else "désactivée"),
        ("Seuil de matching", str(config.match_threshold)),
        ("Niveau de log", config.log_level),
    ]
    for label, value in rows:
        typer.echo(f"{label} : {value}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Boxoffice v{APP_VERSION}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur API Boxoffice."""
    import uvicorn

    logger.info("Démarrage du serveur", host=host, port=port)
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging(container.config())
    logger.info("Démarrage de Boxoffice", version=APP_VERSION)
    app()


if __name__ == "__main__":
    main()

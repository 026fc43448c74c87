"""
Commandes CLI du classement box-office.

- rankings : classement fusionne (Sacnilk + TMDB) en tableau Rich
- compare : comparaison de films par identifiants
- curve : courbe journaliere estimee pour un total donne
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.core.errors import NoCacheAvailable
from src.services.catalog import estimate_total_crores
from src.services.estimator import estimate_daily_collections


def rankings(
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Nombre de films a afficher"),
    ] = 20,
    refresh: Annotated[
        bool,
        typer.Option("--refresh", help="Ignorer le cache et retelecharger la page"),
    ] = False,
) -> None:
    """Affiche le classement box-office enrichi des donnees TMDB."""
    asyncio.run(_rankings_async(limit, refresh))


@with_container()
async def _rankings_async(container, limit: int, refresh: bool) -> None:
    """Implementation async de la commande rankings."""
    if refresh:
        try:
            await container.box_office_service().get_collections(force_refresh=True)
        except NoCacheAvailable as e:
            console.print(f"[red]Classement indisponible:[/red] {e}")
            raise typer.Exit(code=1)

    with suppress_loguru():
        movies = await container.catalog_service().rankings()

    if not movies:
        console.print("[yellow]Aucun film disponible.[/yellow]")
        return

    table = Table(title="Box-office")
    table.add_column("Rang", justify="right")
    table.add_column("Titre")
    table.add_column("Collection", justify="right")
    table.add_column("Annee")
    table.add_column("Note", justify="right")
    table.add_column("TMDB", justify="right", style="dim")

    for movie in movies[:limit]:
        table.add_row(
            str(movie.rank) if movie.rank is not None else "-",
            movie.title,
            movie.collection or "-",
            movie.year or "-",
            f"{movie.vote_average:.1f}" if movie.vote_average else "-",
            str(movie.tmdb_id) if movie.tmdb_id else "-",
        )

    console.print(table)


def compare(
    ids: Annotated[str, typer.Argument(help="Identifiants separes par des virgules (ex: 1,2,3)")],
) -> None:
    """Compare plusieurs films (id du classement ou id TMDB)."""
    asyncio.run(_compare_async(ids))


@with_container()
async def _compare_async(container, ids: str) -> None:
    """Implementation async de la commande compare."""
    with suppress_loguru():
        movies = await container.catalog_service().compare(ids)

    if not movies:
        console.print(f"[yellow]Aucun film trouve pour: {ids}[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title="Comparaison")
    table.add_column("Titre")
    table.add_column("Collection", justify="right")
    table.add_column("Total estime (Cr)", justify="right")
    table.add_column("Jour 1", justify="right")

    for movie in movies:
        first_day = movie.daily_collections[0].collection if movie.daily_collections else "-"
        table.add_row(
            movie.title,
            movie.collection or "-",
            f"{estimate_total_crores(movie):.2f}",
            first_day,
        )

    console.print(table)


def curve(
    total: Annotated[str, typer.Argument(help="Total de collection (ex: \"917.00 Cr\")")],
) -> None:
    """Affiche la courbe journaliere estimee pour un total."""
    points = estimate_daily_collections(total)
    if not points:
        console.print("[yellow]Total nul ou illisible, aucune courbe.[/yellow]")
        return

    table = Table(title=f"Courbe estimee ({total})")
    table.add_column("Jour")
    table.add_column("Collection", justify="right")
    table.add_column("Cumul", justify="right")
    for point in points:
        table.add_row(point.label, point.collection, point.cumulative_collection)

    console.print(table)

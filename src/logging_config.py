"""
Configuration du logging via loguru.

Deux sorties:
- stderr : lignes colorees, avec les champs structures passes en kwargs
  (source, count, error...) affiches en fin de ligne
- fichier : JSON avec rotation et compression, niveau DEBUG

Le niveau de la sortie console vient de BOXOFFICE_LOG_LEVEL et peut etre
ajuste par les options -v / -q de la CLI sans toucher au fichier.
"""

import sys
from typing import Optional

from loguru import logger

from src.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> {extra}"
)

# Identifiant du handler stderr, remplace a chaque changement de niveau
_console_sink_id: Optional[int] = None
_configured = False


def _add_console_sink(level: str) -> None:
    global _console_sink_id
    if _console_sink_id is None:
        # Handler par defaut de loguru
        logger.remove()
    else:
        logger.remove(_console_sink_id)
    _console_sink_id = logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)


def configure_logging(settings: Settings) -> None:
    """
    Installe les deux sorties a partir des Settings.

    Args:
        settings: log_level, log_file, log_rotation_size, log_retention_count
    """
    global _console_sink_id, _configured
    logger.remove()
    _console_sink_id = None
    _configured = True
    _add_console_sink(settings.log_level.upper())

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        rotation=settings.log_rotation_size,
    )


def ensure_logging(settings: Settings) -> None:
    """
    Configure le logging s'il ne l'a pas encore ete dans ce processus.

    Un niveau console choisi par -v / -q est conserve.
    """
    if not _configured:
        configure_logging(settings)


def console_level(verbose: int = 0, quiet: bool = False) -> Optional[str]:
    """Niveau console demande par la CLI: -q -> ERROR, -v -> DEBUG, -vv -> TRACE."""
    if quiet:
        return "ERROR"
    if verbose == 1:
        return "DEBUG"
    if verbose > 1:
        return "TRACE"
    return None


def set_console_level(level: str) -> None:
    """Remplace la sortie console par une sortie au niveau donne."""
    _add_console_sink(level)

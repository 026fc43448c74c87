"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.box_office_commands import (
    compare,
    curve,
    rankings,
)

__all__ = [
    "rankings",
    "compare",
    "curve",
]

"""
Utilitaires et constantes pour Boxoffice.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import (
    CACHE_TTL_HOURS,
    MAX_BOX_OFFICE_RECORDS,
    SACNILK_SOURCE_NAME,
    SACNILK_URL,
)
from src.utils.helpers import format_crores, parse_amount, usd_to_crores

__all__ = [
    "SACNILK_URL",
    "SACNILK_SOURCE_NAME",
    "CACHE_TTL_HOURS",
    "MAX_BOX_OFFICE_RECORDS",
    "parse_amount",
    "usd_to_crores",
    "format_crores",
]

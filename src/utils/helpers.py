"""
Fonctions utilitaires partagees dans le projet Boxoffice.

Ce module centralise les fonctions reutilisees a travers le codebase :
- clean_title : nettoyage des cellules et titres scrapes
- normalize_title : forme canonique d'un titre pour le matching
- parse_amount : extraction d'un montant depuis une chaine libre ("917.00 Cr")
- usd_to_crores / format_crores : conversion des montants TMDB (USD) en crores
"""

import re
import unicodedata
from typing import Optional

from src.utils.constants import CRORE, USD_TO_INR

# Premier nombre decimal d'une chaine deja filtree ("1.2.3" -> "1.2")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_NON_NUMERIC = re.compile(r"[^0-9.]")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir du HTML scrape (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def clean_title(title: str) -> str:
    """Nettoie un titre : retire les caractères invisibles et les espaces superflus."""
    if not title:
        return title
    return " ".join(strip_invisible_chars(title).split())


def normalize_title(title: Optional[str]) -> str:
    """Forme canonique d'un titre : minuscules, sans espaces de bord."""
    if not title:
        return ""
    return clean_title(title).lower().strip()


def parse_amount(value: str | float | int | None) -> float:
    """
    Extrait un montant numerique depuis une chaine libre.

    Tous les caracteres autres que chiffres et point sont retires,
    puis le premier nombre decimal est lu. Une chaine sans chiffre vaut 0.

    Example:
        parse_amount("917.00 Cr")   # 917.0
        parse_amount("₹1,050.30 Cr") # 1050.3
        parse_amount("N/A")         # 0.0
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    cleaned = _NON_NUMERIC.sub("", value)
    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group())


def usd_to_crores(usd: float | int | None) -> float:
    """Convertit un montant en USD en crores de roupies (taux fixe)."""
    if not usd:
        return 0.0
    return usd * USD_TO_INR / CRORE


def format_crores(usd: float | int | None) -> str:
    """
    Formate un montant USD en crores pour l'affichage.

    Returns:
        "₹x.xx Cr", ou "N/A" si le montant est absent ou nul
    """
    if not usd:
        return "N/A"
    return f"₹{usd_to_crores(usd):.2f} Cr"

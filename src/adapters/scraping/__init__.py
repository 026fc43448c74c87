"""
Adaptateurs de la source box-office scrapee.

- SacnilkFetcher : telechargement de la page (httpx, timeout 10s)
- BoxOfficeTableParser : extraction du tableau (BeautifulSoup)
"""

from src.adapters.scraping.sacnilk_fetcher import SacnilkFetcher
from src.adapters.scraping.table_parser import BoxOfficeTableParser

__all__ = [
    "SacnilkFetcher",
    "BoxOfficeTableParser",
]

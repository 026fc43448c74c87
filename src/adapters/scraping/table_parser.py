"""
Parsing du tableau de classement box-office.

Toutes les hypotheses sur la structure de la page Sacnilk sont
regroupees ici: premier tableau contenant des cellules <td>, lignes du
<tbody>, colonnes rang | titre | collection | annee. Cette structure
appartient a un site tiers et peut changer sans preavis; un changement
de mise en page ne doit toucher que ce module.

Regles:
- Lignes avec moins de 4 colonnes ignorees
- Lignes sans titre ou sans collection ignorees
- Rang lu en colonne 0, sinon position de la ligne (base 1)
- 100 films maximum, dans l'ordre du document
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from src.core.entities.box_office import BoxOfficeRecord
from src.core.ports.box_office import ITableParser
from src.services.estimator import estimate_daily_collections
from src.utils.constants import (
    COLLECTION_COLUMN,
    MAX_BOX_OFFICE_RECORDS,
    MIN_COLUMNS,
    RANK_COLUMN,
    TITLE_COLUMN,
    YEAR_COLUMN,
)
from src.utils.helpers import clean_title

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _parse_rank(text: str, fallback: int) -> int:
    """Lit l'entier en tete de cellule ("12." -> 12), sinon retourne fallback."""
    match = _LEADING_INT.match(text)
    if match is None:
        return fallback
    return int(match.group()) or fallback


def _cell_text(cell: Tag) -> str:
    return clean_title(cell.get_text(" ", strip=True))


class BoxOfficeTableParser(ITableParser):
    """
    Parser BeautifulSoup du tableau "100 crores club".

    Example:
        parser = BoxOfficeTableParser()
        records = parser.parse(html)
        records[0].title, records[0].collection
    """

    def __init__(self, max_records: int = MAX_BOX_OFFICE_RECORDS) -> None:
        self.max_records = max_records

    @staticmethod
    def _find_data_table(soup: BeautifulSoup) -> Optional[Tag]:
        """Premier <table> contenant au moins une cellule <td>."""
        for table in soup.find_all("table"):
            if table.find("td") is not None:
                return table
        return None

    @staticmethod
    def _body_rows(table: Tag) -> list[Tag]:
        tbody = table.find("tbody")
        container = tbody if tbody is not None else table
        return container.find_all("tr")

    def parse(self, html: str) -> list[BoxOfficeRecord]:
        """
        Extrait les films du premier tableau de donnees.

        Args:
            html: Document HTML de la page

        Returns:
            Liste de BoxOfficeRecord (vide si aucune ligne exploitable)
        """
        soup = BeautifulSoup(html, "html.parser")
        table = self._find_data_table(soup)
        if table is None:
            logger.warning("Aucun tableau de donnees dans la page box-office")
            return []

        records: list[BoxOfficeRecord] = []
        for position, row in enumerate(self._body_rows(table), start=1):
            cells = row.find_all("td")
            if len(cells) < MIN_COLUMNS:
                continue

            title = _cell_text(cells[TITLE_COLUMN])
            collection = _cell_text(cells[COLLECTION_COLUMN])
            if not title or not collection:
                continue

            records.append(
                BoxOfficeRecord(
                    id=position,
                    rank=_parse_rank(_cell_text(cells[RANK_COLUMN]), position),
                    title=title,
                    collection=collection,
                    year=_cell_text(cells[YEAR_COLUMN]),
                    daily_collections=tuple(estimate_daily_collections(collection)),
                )
            )
            if len(records) >= self.max_records:
                break

        if not records:
            logger.warning("Tableau box-office sans ligne exploitable")
        else:
            logger.debug("Tableau box-office parse", count=len(records))

        return records

"""
Tests du parser du tableau de classement.

Verifie:
- Extraction des colonnes rang / titre / collection / annee
- Lignes ignorees (colonnes manquantes, titre ou collection vides)
- Repli du rang sur la position de la ligne
- Limite de 100 films
"""

import pytest

from src.adapters.scraping.table_parser import BoxOfficeTableParser
from src.core.ports.box_office import ITableParser
from tests.fixtures.sacnilk_pages import (
    SACNILK_PAGE,
    SACNILK_PAGE_WITH_BAD_ROWS,
    SACNILK_PAGE_WITHOUT_TABLE,
    SACNILK_PAGE_WITHOUT_TBODY,
    build_ranking_page,
)


@pytest.fixture
def parser() -> BoxOfficeTableParser:
    return BoxOfficeTableParser()


class TestParse:
    """Tests de l'extraction des lignes."""

    def test_implements_interface(self, parser):
        assert isinstance(parser, ITableParser)

    def test_parses_rows_in_document_order(self, parser):
        records = parser.parse(SACNILK_PAGE)

        assert [r.title for r in records] == ["Jawan", "Pathaan", "Animal"]
        assert [r.rank for r in records] == [1, 2, 3]
        assert [r.id for r in records] == [1, 2, 3]

    def test_cells_are_trimmed(self, parser):
        record = parser.parse(SACNILK_PAGE)[1]

        assert record.title == "Pathaan"
        assert record.collection == "543.09 Cr"
        assert record.year == "2023"

    def test_navigation_table_skipped(self, parser):
        """Le premier tableau sans <td> n'est pas le tableau de donnees."""
        assert len(parser.parse(SACNILK_PAGE)) == 3

    def test_daily_collections_attached(self, parser):
        record = parser.parse(SACNILK_PAGE)[0]

        assert len(record.daily_collections) == 30
        assert record.daily_collections[0].collection == "160.06"

    def test_table_without_tbody(self, parser):
        records = parser.parse(SACNILK_PAGE_WITHOUT_TBODY)

        assert len(records) == 1
        assert records[0].title == "Stree 2"
        assert records[0].rank == 1

    def test_no_table_returns_empty_list(self, parser):
        assert parser.parse(SACNILK_PAGE_WITHOUT_TABLE) == []

    def test_empty_document(self, parser):
        assert parser.parse("") == []


class TestInvalidRows:
    """Tests des lignes ignorees."""

    def test_invalid_rows_skipped(self, parser):
        records = parser.parse(SACNILK_PAGE_WITH_BAD_ROWS)

        assert [r.title for r in records] == ["Gadar 2", "Dangal"]

    def test_non_numeric_rank_falls_back_to_position(self, parser):
        dangal = parser.parse(SACNILK_PAGE_WITH_BAD_ROWS)[1]

        assert dangal.rank == 5
        assert dangal.id == 5

    def test_zero_rank_falls_back_to_position(self, parser):
        html = "<table><tr><td>0</td><td>Sultan</td><td>300.45 Cr</td><td>2016</td></tr></table>"

        assert parser.parse(html)[0].rank == 1

    def test_rank_with_trailing_dot(self, parser):
        html = "<table><tr><td>12.</td><td>Sultan</td><td>300.45 Cr</td><td>2016</td></tr></table>"

        assert parser.parse(html)[0].rank == 12

    def test_unreadable_collection_kept_with_empty_curve(self, parser):
        html = "<table><tr><td>1</td><td>Sultan</td><td>TBA</td><td>2016</td></tr></table>"

        record = parser.parse(html)[0]

        assert record.collection == "TBA"
        assert record.daily_collections == ()


class TestLimit:
    """Tests de la limite du nombre de films."""

    def test_capped_at_one_hundred(self, parser):
        records = parser.parse(build_ranking_page(150))

        assert len(records) == 100
        assert records[-1].title == "Movie 100"

    def test_custom_limit(self):
        records = BoxOfficeTableParser(max_records=5).parse(build_ranking_page(20))

        assert [r.rank for r in records] == [1, 2, 3, 4, 5]

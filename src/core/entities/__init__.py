"""
Business entities representing core domain concepts.

Exports:
- DayPoint: One day of an estimated collection curve
- BoxOfficeRecord: One row of the scraped box-office ranking
- MetadataRecord: Movie metadata from TMDB
- TitleMatch: Result of matching a scraped title to metadata
- MergedMovie: Box-office record enriched with metadata
"""

from src.core.entities.media import MetadataRecord
from src.core.entities.box_office import (
    BoxOfficeRecord,
    DayPoint,
    MergedMovie,
    TitleMatch,
)

__all__ = [
    "DayPoint",
    "BoxOfficeRecord",
    "MetadataRecord",
    "TitleMatch",
    "MergedMovie",
]

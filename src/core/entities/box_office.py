"""
Box-office entities.

Records scraped from the box-office source (Sacnilk), the synthetic daily
curve attached to each of them, and the merged view combining a box-office
record with its TMDB metadata.
"""

from dataclasses import dataclass
from typing import Any, Optional

from src.core.entities.media import MetadataRecord


@dataclass(frozen=True)
class DayPoint:
    """
    One day of an estimated collection curve.

    Amounts are decimal strings with two fractional digits, in the unit of the
    source total (crores for Sacnilk figures).

    Attributes:
        day: Day index, starting at 1
        label: Display label ("Day 1")
        collection: Amount collected that day
        cumulative_collection: Running total up to and including this day
    """

    day: int
    label: str
    collection: str
    cumulative_collection: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": self.day,
            "date": self.label,
            "collection": self.collection,
            "cumulativeCollection": self.cumulative_collection,
        }


@dataclass(frozen=True)
class BoxOfficeRecord:
    """
    One row of the box-office ranking table.

    Attributes:
        id: Position of the row in the source table (1-based)
        rank: Rank as printed in the table (falls back to the row position)
        title: Movie title as printed
        collection: Total collection display string (e.g. "917.00 Cr")
        year: Release year as printed
        daily_collections: Estimated 30-day curve derived from the total
    """

    id: int
    rank: int
    title: str
    collection: str
    year: str
    daily_collections: tuple[DayPoint, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "rank": self.rank,
            "title": self.title,
            "collection": self.collection,
            "year": self.year,
            "dailyCollections": [point.to_dict() for point in self.daily_collections],
        }


@dataclass(frozen=True)
class TitleMatch:
    """
    Outcome of matching a scraped title against metadata records.

    Attributes:
        record: Chosen metadata record
        confidence: Similarity in [0, 1] (1.0 for an exact title match)
        method: "exact", "token_set" or "first_token"
    """

    record: MetadataRecord
    confidence: float
    method: str


@dataclass
class MergedMovie:
    """
    Box-office record enriched with its best-matching TMDB metadata.

    Enrichment fields stay None when no metadata matched. When the box-office
    source is unavailable, the box-office fields stay None and the id is the
    TMDB id.
    """

    id: int
    title: str
    rank: Optional[int] = None
    collection: Optional[str] = None
    year: Optional[str] = None
    daily_collections: tuple[DayPoint, ...] = ()
    tmdb_id: Optional[int] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    overview: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    release_date: Optional[str] = None
    original_language: Optional[str] = None
    revenue: Optional[int] = None
    budget: Optional[int] = None
    match_confidence: Optional[float] = None
    match_method: Optional[str] = None

    @property
    def has_box_office(self) -> bool:
        return self.collection is not None

    @property
    def is_enriched(self) -> bool:
        return self.tmdb_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "rank": self.rank,
            "title": self.title,
            "collection": self.collection,
            "year": self.year,
            "dailyCollections": [point.to_dict() for point in self.daily_collections],
            "poster_path": self.poster_path,
            "backdrop_path": self.backdrop_path,
            "overview": self.overview,
            "vote_average": self.vote_average,
            "vote_count": self.vote_count,
            "release_date": self.release_date,
            "original_language": self.original_language,
            "revenue": self.revenue,
            "budget": self.budget,
            "tmdb_id": self.tmdb_id,
            "match_confidence": self.match_confidence,
            "match_method": self.match_method,
        }

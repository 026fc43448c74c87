"""
Media metadata entities.

Entities representing movies with their metadata from the external
metadata API (TMDB).
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class MetadataRecord:
    """
    Movie metadata from TMDB.

    Immutable once fetched. Monetary figures are the raw TMDB values (USD).

    Attributes:
        id: The Movie Database ID
        title: Localized title
        original_title: Original language title
        poster_path: Path to poster image on TMDB CDN
        backdrop_path: Path to backdrop image on TMDB CDN
        overview: Plot summary
        original_language: ISO 639-1 code ("hi")
        vote_average: Average rating (0-10)
        vote_count: Number of votes
        release_date: Release date (YYYY-MM-DD), as returned by the API
        revenue: Worldwide revenue in USD (0 or None when unknown)
        budget: Budget in USD (0 or None when unknown)
        popularity: TMDB popularity score
    """

    id: int
    title: str
    original_title: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    overview: Optional[str] = None
    original_language: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    release_date: Optional[str] = None
    revenue: Optional[int] = None
    budget: Optional[int] = None
    popularity: Optional[float] = None

    @property
    def year(self) -> Optional[int]:
        """Release year extracted from release_date."""
        if self.release_date and len(self.release_date) >= 4:
            return int(self.release_date[:4])
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "original_title": self.original_title,
            "poster_path": self.poster_path,
            "backdrop_path": self.backdrop_path,
            "overview": self.overview,
            "original_language": self.original_language,
            "vote_average": self.vote_average,
            "vote_count": self.vote_count,
            "release_date": self.release_date,
            "revenue": self.revenue,
            "budget": self.budget,
            "popularity": self.popularity,
        }

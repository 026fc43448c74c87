"""
Fusion du classement box-office et des metadonnees TMDB.

Les deux sources sont interrogees en parallele. Chaque film du classement
recoit au plus une fiche TMDB, choisie par TitleMatcher. Degradations:

- TMDB indisponible -> films du classement sans enrichissement
- Classement indisponible ou vide -> fiches TMDB remises au format MergedMovie
- Les deux indisponibles -> liste vide

L'ordre de sortie est celui du classement (ordre des rangs).
"""

import asyncio
from typing import Optional, Sequence

from loguru import logger

from src.core.entities.box_office import BoxOfficeRecord, MergedMovie, TitleMatch
from src.core.entities.media import MetadataRecord
from src.core.errors import BoxOfficeError
from src.core.ports.api_clients import IMetadataClient
from src.services.box_office import BoxOfficeService
from src.services.matcher import TitleMatcher
from src.utils.constants import DEFAULT_MATCH_THRESHOLD


def _from_box_office(record: BoxOfficeRecord, match: Optional[TitleMatch]) -> MergedMovie:
    movie = MergedMovie(
        id=record.id,
        title=record.title,
        rank=record.rank,
        collection=record.collection,
        year=record.year,
        daily_collections=record.daily_collections,
    )
    if match is None:
        return movie

    metadata = match.record
    movie.tmdb_id = metadata.id
    movie.poster_path = metadata.poster_path
    movie.backdrop_path = metadata.backdrop_path
    movie.overview = metadata.overview
    movie.vote_average = metadata.vote_average
    movie.vote_count = metadata.vote_count
    movie.release_date = metadata.release_date
    movie.original_language = metadata.original_language
    movie.match_confidence = match.confidence
    movie.match_method = match.method
    return movie


def _from_metadata(record: MetadataRecord) -> MergedMovie:
    return MergedMovie(
        id=record.id,
        title=record.title,
        year=str(record.year) if record.year else None,
        tmdb_id=record.id,
        poster_path=record.poster_path,
        backdrop_path=record.backdrop_path,
        overview=record.overview,
        vote_average=record.vote_average,
        vote_count=record.vote_count,
        release_date=record.release_date,
        original_language=record.original_language,
        revenue=record.revenue,
        budget=record.budget,
    )


class MergerService:
    """
    Service de fusion des deux sources de films.

    Example:
        merger = MergerService(box_office_service, tmdb_client)
        movies = await merger.load_movies()
        for movie in movies:
            print(movie.rank, movie.title, movie.poster_path)
    """

    def __init__(
        self,
        box_office: BoxOfficeService,
        metadata_client: IMetadataClient,
        match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    ) -> None:
        """
        Initialise le service de fusion.

        Args:
            box_office: Service du classement scrape
            metadata_client: Client de l'API de metadonnees
            match_threshold: Confiance minimale d'une correspondance de titre
        """
        self._box_office = box_office
        self._metadata_client = metadata_client
        self.match_threshold = match_threshold

    def merge(
        self,
        box_office: Sequence[BoxOfficeRecord],
        metadata: Sequence[MetadataRecord],
    ) -> list[MergedMovie]:
        """
        Fusionne les deux collections.

        Args:
            box_office: Films du classement, dans l'ordre des rangs
            metadata: Fiches TMDB

        Returns:
            Un MergedMovie par film du classement, ou les fiches TMDB
            reformatees si le classement est vide
        """
        if not box_office:
            logger.warning("Classement vide, fiches TMDB seules", count=len(metadata))
            return [_from_metadata(record) for record in metadata]

        matcher = TitleMatcher(metadata, threshold=self.match_threshold)
        merged = [_from_box_office(record, matcher.match(record.title)) for record in box_office]

        matched = sum(1 for movie in merged if movie.is_enriched)
        logger.info(
            "Fusion classement / TMDB",
            box_office=len(box_office),
            metadata=len(matcher),
            matched=matched,
        )
        return merged

    async def load_movies(self) -> list[MergedMovie]:
        """
        Recupere les deux sources en parallele puis les fusionne.

        Une source en echec n'empeche pas l'autre: seule la fusion
        est degradee.

        Returns:
            Liste de MergedMovie (vide si les deux sources echouent)
        """
        box_result, metadata_result = await asyncio.gather(
            self._box_office.get_collections(),
            self._metadata_client.discover_movies(),
            return_exceptions=True,
        )

        if isinstance(box_result, BaseException):
            if not isinstance(box_result, BoxOfficeError):
                raise box_result
            logger.warning("Classement box-office indisponible", error=str(box_result))
            box_office: Sequence[BoxOfficeRecord] = ()
        else:
            box_office = box_result.records

        if isinstance(metadata_result, BaseException):
            if not isinstance(metadata_result, BoxOfficeError):
                raise metadata_result
            logger.warning("Metadonnees TMDB indisponibles", error=str(metadata_result))
            metadata: Sequence[MetadataRecord] = ()
        else:
            metadata = metadata_result

        return self.merge(box_office, metadata)

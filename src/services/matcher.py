"""
Matching des titres scrapes avec les metadonnees TMDB.

Chaque correspondance porte une confiance (0 a 1) et la methode qui l'a
produite, pour que les associations ambigues restent observables:

- exact: titre normalise (minuscules, sans espaces de bord) identique au
  titre localise ou original -> 1.0
- token_set: similarite rapidfuzz token_set_ratio / 100, sur le meilleur
  des deux titres TMDB; ne compte que si les titres partagent un mot entier
  ("Sultan" et "Salaar" ne se ressemblent qu'au niveau des caracteres)
- first_token: l'un des titres contient le premier mot de l'autre ->
  au moins FIRST_TOKEN_CONFIDENCE (0.5)

Le meilleur candidat au-dessus du seuil l'emporte; a egalite, le premier
dans l'ordre TMDB. Deux films partageant un premier mot peuvent etre
confondus: la confiance de 0.5 signale ce cas.
"""

from typing import Iterable, Optional

from rapidfuzz import fuzz, utils

from src.core.entities.box_office import TitleMatch
from src.core.entities.media import MetadataRecord
from src.utils.constants import DEFAULT_MATCH_THRESHOLD, FIRST_TOKEN_CONFIDENCE
from src.utils.helpers import normalize_title


def _words(title: str) -> set[str]:
    return set(utils.default_process(title).split())


def title_similarity(title: str, candidate: str) -> float:
    """
    Similarite de deux titres (0 a 1), independante de l'ordre des mots.

    Un titre dont tous les mots figurent dans l'autre vaut 1.0
    ("Pathaan" / "Pathaan (2023)"). Sans mot commun, la similarite est 0.
    """
    if not _words(title) & _words(candidate):
        return 0.0
    return fuzz.token_set_ratio(title, candidate, processor=utils.default_process) / 100


def _first_token(title: str) -> str:
    tokens = title.split()
    return tokens[0] if tokens else ""


def _shares_first_token(title: str, candidate: str) -> bool:
    """Verification bidirectionnelle du premier mot, en sous-chaine."""
    title_token = _first_token(title)
    candidate_token = _first_token(candidate)
    return bool(
        (title_token and title_token in candidate)
        or (candidate_token and candidate_token in title)
    )


def _candidate_titles(record: MetadataRecord) -> list[str]:
    titles = [normalize_title(record.title)]
    original = normalize_title(record.original_title)
    if original and original not in titles:
        titles.append(original)
    return [t for t in titles if t]


class TitleMatcher:
    """
    Index des metadonnees pour le matching de titres.

    L'index exact est construit une fois; la recherche approchee parcourt
    tous les candidats.

    Example:
        matcher = TitleMatcher(tmdb_records)
        match = matcher.match("Pathaan")
        if match:
            print(match.record.id, match.confidence, match.method)
    """

    def __init__(
        self,
        candidates: Iterable[MetadataRecord],
        threshold: float = DEFAULT_MATCH_THRESHOLD,
    ) -> None:
        self.threshold = threshold
        self._candidates = list(candidates)
        self._exact: dict[str, MetadataRecord] = {}
        for record in self._candidates:
            for title in _candidate_titles(record):
                self._exact.setdefault(title, record)

    def __len__(self) -> int:
        return len(self._candidates)

    def _score(self, title: str, record: MetadataRecord) -> tuple[float, str]:
        best_score, best_method = 0.0, "token_set"
        for candidate in _candidate_titles(record):
            score, method = title_similarity(title, candidate), "token_set"
            if score < FIRST_TOKEN_CONFIDENCE and _shares_first_token(title, candidate):
                score, method = FIRST_TOKEN_CONFIDENCE, "first_token"
            if score > best_score:
                best_score, best_method = score, method
        return best_score, best_method

    def match(self, title: str) -> Optional[TitleMatch]:
        """
        Cherche la meilleure correspondance pour un titre.

        Args:
            title: Titre scrape

        Returns:
            TitleMatch, ou None si aucun candidat n'atteint le seuil
        """
        normalized = normalize_title(title)
        if not normalized:
            return None

        exact = self._exact.get(normalized)
        if exact is not None:
            return TitleMatch(record=exact, confidence=1.0, method="exact")

        best: Optional[TitleMatch] = None
        for record in self._candidates:
            score, method = self._score(normalized, record)
            score = round(score, 4)
            if score >= self.threshold and (best is None or score > best.confidence):
                best = TitleMatch(record=record, confidence=score, method=method)
        return best

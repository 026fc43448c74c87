"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe BOXOFFICE_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - sans elle, le classement est servi sans enrichissement.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.constants import (
    BROWSER_USER_AGENT,
    CACHE_TTL_HOURS,
    DEFAULT_MATCH_THRESHOLD,
    FETCH_TIMEOUT_SECONDS,
    MAX_BOX_OFFICE_RECORDS,
    SACNILK_URL,
    TMDB_DISCOVER_LANGUAGE,
    TMDB_DISCOVER_PAGES,
    TMDB_DISCOVER_RELEASE_DATE_GTE,
)

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe BOXOFFICE_.
    Exemple : BOXOFFICE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="BOXOFFICE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Source box-office
    box_office_url: str = Field(default=SACNILK_URL)
    fetch_timeout: float = Field(default=FETCH_TIMEOUT_SECONDS, gt=0)
    user_agent: str = Field(default=BROWSER_USER_AGENT)
    max_records: int = Field(default=MAX_BOX_OFFICE_RECORDS, ge=1)

    # Cache du classement
    cache_ttl_hours: float = Field(default=CACHE_TTL_HOURS, gt=0)

    # TMDB (OPTIONNEL - enrichissement désactivé si non défini)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default=TMDB_DISCOVER_LANGUAGE)
    tmdb_release_date_gte: str = Field(default=TMDB_DISCOVER_RELEASE_DATE_GTE)
    tmdb_pages: int = Field(default=TMDB_DISCOVER_PAGES, ge=1, le=20)

    # Matching des titres
    match_threshold: float = Field(default=DEFAULT_MATCH_THRESHOLD, ge=0, le=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/boxoffice.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def empty_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Une clé vide (BOXOFFICE_TMDB_API_KEY=) équivaut à une clé absente."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.tmdb_api_key is not None

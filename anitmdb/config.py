"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ANITMDB_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle : sans elle, les requêtes partent sans authentification
et TMDB répond 401 (la résolution renvoie alors un nom vide).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from anitmdb.utils.constants import (
    EPISODE_TITLE_PLACEHOLDER,
    LOG_LEVELS,
    NARROWING_DELAY_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
)

# Trouver le fichier .env à la racine du projet (parent de anitmdb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ANITMDB_.
    Exemple : ANITMDB_TMDB_LANGUAGE=fr-FR
    """

    model_config = SettingsConfigDict(
        env_prefix="ANITMDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # TMDB
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default="zh-CN")
    tmdb_id: bool = Field(default=False)  # Ajoute " [tmdbid=ID]" au nom
    tmdb_timeout: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    narrowing_delay: float = Field(default=NARROWING_DELAY_SECONDS, ge=0)
    rate_limit_max_attempts: int = Field(default=3, ge=1)

    # Renommage (seule la présence de ${episodeTitle} est consultée ici)
    rename_template: str = Field(default="${title} S${seasonFormat}E${episodeFormat}")

    # Logging : niveau console, niveau et rotation du fichier JSON (None = pas de fichier)
    log_level: str = Field(default="INFO")
    log_file_level: str = Field(default="DEBUG")
    log_file: Optional[Path] = Field(default=Path("logs/anitmdb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home ; une valeur vide désactive le fichier."""
        if v is None or str(v).strip() == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level", "log_file_level")
    @classmethod
    def check_level(cls, v: str) -> str:
        """Normalise le niveau en majuscules et refuse les niveaux inconnus de loguru."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Niveau de log inconnu : {v}")
        return level

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

    @property
    def episode_title_enabled(self) -> bool:
        """Le template de renommage utilise-t-il le titre d'épisode ?"""
        return EPISODE_TITLE_PLACEHOLDER in self.rename_template

"""
Objets valeur pour la resolution des titres vers le catalogue TMDB.

Les resultats de recherche (SearchHit) sont transitoires : ils n'existent que
le temps d'une resolution. La fiche resolue (MediaRecord) est attachee a
l'entite Anime et remplacee a chaque nouvelle resolution, jamais modifiee.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class MediaType(Enum):
    """Type de media cote TMDB, utilise dans l'URL de recherche.

    Valeurs:
        TV: Serie (episodique)
        MOVIE: Film, OVA ou sortie unique
    """

    TV = "tv"
    MOVIE = "movie"

    @classmethod
    def from_single_release(cls, single_release: bool) -> "MediaType":
        """Derive le type depuis le drapeau "sortie unique" de l'entite."""
        return cls.MOVIE if single_release else cls.TV


@dataclass(frozen=True)
class NormalizedTitle:
    """
    Titre nettoye de ses annotations d'annee.

    Attributs:
        title: Titre sans annee, espaces de bord retires
        had_year: True si une annee a ete retiree (ajoute " (YEAR)" a l'affichage)
    """

    title: str
    had_year: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.title.strip()


@dataclass(frozen=True)
class SearchHit:
    """
    Resultat brut d'une recherche TMDB.

    Attributs:
        id: ID TMDB (chaine, copie telle quelle)
        name: Nom de la serie ("name") ou titre du film ("title")
        release_date: Date brute ("first_air_date" ou "release_date"), peut etre vide
        genre_ids: IDs de genre TMDB (vide si absents ou nuls)
    """

    id: str
    name: str
    release_date: Optional[str] = None
    genre_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class MediaRecord:
    """
    Fiche TMDB resolue pour un anime.

    Attributs:
        id: ID TMDB
        name: Nom canonique (normalise pour le renommage)
        release_date: Date de premiere diffusion ou de sortie
    """

    id: str
    name: str
    release_date: Optional[date] = None

    @property
    def year(self) -> Optional[int]:
        """Annee de sortie, ou None si la date est inconnue."""
        return self.release_date.year if self.release_date else None


@dataclass(frozen=True)
class EpisodeEntry:
    """Episode d'une saison tel que renvoye par TMDB."""

    season_number: int
    episode_number: int
    name: str

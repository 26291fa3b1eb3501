"""
Filtrage par genre et selection de la fiche TMDB.

Seuls les resultats classes "Animation" (genre 16) sont retenus. Parmi eux,
un nom strictement identique a la requete l'emporte ; sinon le premier
resultat dans l'ordre de pertinence TMDB est choisi.
"""

from datetime import date
from typing import Optional

from anitmdb.adapters.api.errors import ParseError
from anitmdb.core.value_objects import MediaRecord, SearchHit
from anitmdb.utils.constants import ANIMATION_GENRE_ID
from anitmdb.utils.helpers import normalize_display_name


def is_animation(hit: SearchHit) -> bool:
    """Un resultat sans genres n'est jamais considere comme de l'animation."""
    return ANIMATION_GENRE_ID in hit.genre_ids


def filter_animation(hits: list[SearchHit]) -> list[SearchHit]:
    """Conserve les resultats Animation en preservant l'ordre TMDB."""
    return [hit for hit in hits if is_animation(hit)]


def parse_release_date(value: Optional[str]) -> Optional[date]:
    """
    Parse une date TMDB (YYYY-MM-DD).

    Raises:
        ParseError: si la date est presente mais illisible
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError as e:
        raise ParseError(f"date TMDB invalide: {value!r}") from e


class CandidateRanker:
    """Convertit les resultats filtres en MediaRecord et choisit le meilleur."""

    def to_record(self, hit: SearchHit) -> MediaRecord:
        return MediaRecord(
            id=hit.id,
            name=normalize_display_name(hit.name),
            release_date=parse_release_date(hit.release_date),
        )

    def pick(self, hits: list[SearchHit], query: str) -> MediaRecord:
        """
        Choisit la fiche correspondant le mieux a la requete.

        Args:
            hits: Resultats deja filtres (non vide)
            query: Requete de la recherche gagnante (eventuellement retrecie)

        Returns:
            Fiche dont le nom normalise egale exactement la requete,
            sinon la premiere fiche
        """
        records = [self.to_record(hit) for hit in hits]
        for record in records:
            if record.name == query:
                return record
        return records[0]

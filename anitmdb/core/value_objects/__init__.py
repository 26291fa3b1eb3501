"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaType : Type de media TMDB (TV, MOVIE)
- NormalizedTitle : Titre nettoye de son annee
- SearchHit : Resultat brut d'une recherche catalogue
- MediaRecord : Fiche TMDB resolue (id, nom, date de sortie)
- EpisodeEntry : Entree d'episode d'une saison
"""

from anitmdb.core.value_objects.media_record import (
    EpisodeEntry,
    MediaRecord,
    MediaType,
    NormalizedTitle,
    SearchHit,
)

__all__ = [
    "EpisodeEntry",
    "MediaRecord",
    "MediaType",
    "NormalizedTitle",
    "SearchHit",
]

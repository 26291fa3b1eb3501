"""
Entites metier.

Exports:
- Anime: Anime suivi, porteur de la fiche TMDB resolue
"""

from anitmdb.core.entities.anime import Anime

__all__ = ["Anime"]

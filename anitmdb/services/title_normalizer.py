"""
Normalisation des titres bruts avant recherche TMDB.

Les titres issus des flux RSS portent souvent l'annee de diffusion
("Spy x Family (2022)", "Dungeon Meshi [2024]"). L'annee est retiree
de la requete mais memorisee : elle sera reaffichee depuis la date TMDB.
"""

from anitmdb.core.value_objects import NormalizedTitle
from anitmdb.utils.constants import YEAR_PATTERN


def normalize_title(raw_title: str) -> NormalizedTitle:
    """
    Retire toutes les annotations d'annee d'un titre.

    Args:
        raw_title: Titre brut (peut etre vide ou None)

    Returns:
        NormalizedTitle; title est vide si le titre ne contenait qu'une annee
    """
    title = (raw_title or "").strip()
    if not title:
        return NormalizedTitle(title="")

    if YEAR_PATTERN.search(title) is None:
        return NormalizedTitle(title=title)

    return NormalizedTitle(title=YEAR_PATTERN.sub("", title).strip(), had_year=True)

"""
Fonctions utilitaires partagees dans le projet AniTMDB.

Ce module centralise les fonctions reutilisees a travers le codebase :
- strip_invisible_chars : suppression des caracteres de controle
- normalize_display_name : nom TMDB nettoye pour l'affichage et le renommage
"""

import re
import unicodedata

from pathvalidate import sanitize_filename

_WHITESPACE_RUN = re.compile(r"\s+")


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def normalize_display_name(name: str) -> str:
    """
    Nettoie un nom renvoye par TMDB pour l'utiliser dans un nom de fichier.

    Transformations appliquées :
    - Caractères invisibles supprimés
    - Caractères interdits dans un nom de fichier (: / \\ * ? " < > |) -> espace
    - Espaces multiples réduits à un seul, espaces de bord retirés

    Args:
        name: Nom brut depuis l'API.

    Returns:
        Nom nettoyé (chaîne vide si rien ne subsiste).
    """
    if not name:
        return ""

    text = strip_invisible_chars(name)
    text = sanitize_filename(text, platform="universal", replacement_text=" ")
    return _WHITESPACE_RUN.sub(" ", text).strip()

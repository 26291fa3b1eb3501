"""
Erreurs levees par les clients API.

Les services attrapent ces erreurs a leur frontiere, les journalisent et
les traitent comme "aucun resultat" : elles ne remontent jamais a l'appelant
final.
"""

from typing import Optional


class TMDBError(Exception):
    """Erreur de base pour les appels au catalogue TMDB."""


class TransportError(TMDBError):
    """
    Statut HTTP non 2xx ou erreur reseau (timeout, connexion refusee).

    Attributes:
        status_code: Statut HTTP recu, ou None pour une erreur reseau.
    """

    def __init__(self, status_code: Optional[int] = None, message: str = "") -> None:
        self.status_code = status_code
        if not message:
            message = f"status: {status_code}" if status_code is not None else "network error"
        super().__init__(message)


class ParseError(TMDBError):
    """Reponse JSON malformee ou champ attendu manquant."""

"""
Clients API externes pour la resolution des titres.

Ce module fournit l'adaptateur TMDB (The Movie Database) et son
infrastructure:
- TMDBClient: recherche et episodes de saison
- TransportError / ParseError: erreurs de transport et de format
- RateLimitError, with_retry, request_with_retry: relance sur 429

Le client implemente ICatalogClient defini dans core/ports/api_clients.py.
"""

from anitmdb.adapters.api.errors import ParseError, TMDBError, TransportError
from anitmdb.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from anitmdb.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "ParseError",
    "RateLimitError",
    "TMDBClient",
    "TMDBError",
    "TransportError",
    "request_with_retry",
    "with_retry",
]

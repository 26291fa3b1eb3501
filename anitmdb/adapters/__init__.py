"""
Couche infrastructure (adapters).

- api/ : Client HTTP TMDB, retry sur rate limiting, erreurs de transport
- cli/ : Commandes Typer
"""

"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports client API : Contrats pour les services externes
- ICatalogClient : Interface du catalogue de metadonnees (TMDB)
"""

from anitmdb.core.ports.api_clients import ICatalogClient

__all__ = ["ICatalogClient"]

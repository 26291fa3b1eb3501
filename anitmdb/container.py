"""
Container d'injection de dependances via dependency-injector.

Le service de resolution est un Singleton : son verrou est le point de
serialisation unique de toutes les resolutions du processus.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .services.candidate_ranker import CandidateRanker
from .services.catalog_search import CatalogSearchService
from .services.episode_titles import EpisodeTitleService
from .services.resolution import ResolutionService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.resolution_service()
        name = await service.resolve_display_name(anime)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client API - Singleton (un seul client httpx par processus)
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.tmdb_language,
        timeout=config.provided.tmdb_timeout,
        max_attempts=config.provided.rate_limit_max_attempts,
    )

    catalog_search = providers.Singleton(
        CatalogSearchService,
        client=tmdb_client,
        narrowing_delay=config.provided.narrowing_delay,
    )

    # Stateless
    candidate_ranker = providers.Singleton(CandidateRanker)

    resolution_service = providers.Singleton(
        ResolutionService,
        search=catalog_search,
        ranker=candidate_ranker,
        expose_tmdb_id=config.provided.tmdb_id,
    )

    # Hors verrou global
    episode_title_service = providers.Singleton(
        EpisodeTitleService,
        client=tmdb_client,
        rename_template=config.provided.rename_template,
    )

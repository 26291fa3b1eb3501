"""
Recherche TMDB avec repli sur le premier mot de la requete.

Quand aucun resultat Animation n'est trouve, la requete est reduite a son
premier mot et la recherche est relancee apres une courte pause. La boucle
s'arrete sur une requete d'un seul mot : au plus deux recherches par titre.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from anitmdb.core.ports.api_clients import ICatalogClient
from anitmdb.core.value_objects import MediaType, SearchHit
from anitmdb.services.candidate_ranker import filter_animation
from anitmdb.utils.constants import NARROWING_DELAY_SECONDS


@dataclass(frozen=True)
class SearchOutcome:
    """
    Recherche ayant produit au moins un resultat Animation.

    Attributs:
        query: Requete effectivement utilisee (apres retrecissement)
        hits: Resultats Animation, dans l'ordre TMDB
    """

    query: str
    hits: list[SearchHit]


def narrow_query(query: str) -> Optional[str]:
    """Reduit la requete a son premier mot, None si elle n'en a qu'un."""
    words = query.split()
    if len(words) <= 1:
        return None
    return words[0]


class CatalogSearchService:
    """
    Service de recherche catalogue avec retrecissement de la requete.

    Les erreurs du client (TransportError, ParseError) ne sont pas relancees
    ici : elles remontent a l'appelant.
    """

    def __init__(
        self,
        client: ICatalogClient,
        narrowing_delay: float = NARROWING_DELAY_SECONDS,
    ) -> None:
        self._client = client
        self._narrowing_delay = narrowing_delay

    async def search(self, title: str, media_type: MediaType) -> Optional[SearchOutcome]:
        """
        Recherche un anime, en retrecissant la requete si necessaire.

        Args:
            title: Titre normalise (non vide)
            media_type: TV ou MOVIE

        Returns:
            SearchOutcome, ou None si aucun resultat Animation a aucun niveau
        """
        query: Optional[str] = title
        while query is not None:
            hits = filter_animation(await self._client.search(query, media_type))
            if hits:
                return SearchOutcome(query=query, hits=hits)

            next_query = narrow_query(query)
            if next_query is None:
                break

            logger.debug(f"Aucun anime pour '{query}', nouvel essai avec '{next_query}'")
            await asyncio.sleep(self._narrowing_delay)
            query = next_query

        logger.info(f"Aucun anime TMDB trouve pour '{title}'")
        return None

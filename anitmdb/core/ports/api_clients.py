"""
Interfaces ports pour les clients API.

Interface abstraite (port) definissant le contrat du catalogue externe.
L'implementation (adaptateur) est le client TMDB.
"""

from abc import ABC, abstractmethod

from anitmdb.core.value_objects import EpisodeEntry, MediaType, SearchHit


class ICatalogClient(ABC):
    """
    Interface de base pour le catalogue de metadonnees.

    Chaque appel correspond a UNE requete HTTP : le retrecissement de la
    requete et le filtrage par genre sont faits par les services.
    """

    @abstractmethod
    async def search(self, query: str, media_type: MediaType) -> list[SearchHit]:
        """
        Recherche des medias par titre.

        Args :
            query : Requete texte libre
            media_type : TV ou MOVIE (choisit l'endpoint search/{type})

        Retourne :
            Resultats dans l'ordre de pertinence du catalogue

        Leve :
            TransportError : statut HTTP non 2xx ou erreur reseau
            ParseError : reponse JSON malformee
        """
        ...

    @abstractmethod
    async def get_season_episodes(self, tv_id: str, season: int) -> list[EpisodeEntry]:
        """
        Recupere la liste des episodes d'une saison.

        Args :
            tv_id : ID TMDB de la serie
            season : Numero de saison

        Retourne :
            Episodes tels que renvoyes par l'API (non filtres)
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...

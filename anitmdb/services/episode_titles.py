"""
Recuperation des titres d'episodes d'une saison.

L'enrichissement est best-effort : toute erreur (transport, statut HTTP,
JSON malforme) est journalisee et donne une table vide. Aucun appel reseau
n'est fait quand le resultat ne servirait pas (film/OVA, pas de fiche,
template de renommage sans ${episodeTitle}).
"""

from typing import Optional

from loguru import logger

from anitmdb.core.entities import Anime
from anitmdb.core.ports.api_clients import ICatalogClient
from anitmdb.core.value_objects import MediaRecord
from anitmdb.utils.constants import EPISODE_TITLE_PLACEHOLDER


class EpisodeTitleService:
    """
    Service de titres d'episodes.

    N'utilise pas le verrou global de resolution : plusieurs recuperations
    peuvent tourner en parallele.
    """

    def __init__(self, client: ICatalogClient, rename_template: str = "") -> None:
        self._client = client
        self._rename_template = rename_template

    @property
    def template_uses_episode_title(self) -> bool:
        return EPISODE_TITLE_PLACEHOLDER in (self._rename_template or "")

    async def get_episode_title_map(self, anime: Anime) -> dict[int, str]:
        """
        Titres d'episodes de la saison courante de l'anime.

        Args:
            anime: Anime deja resolu (anime.tmdb renseigne)

        Returns:
            Table numero d'episode -> titre, vide si non applicable
        """
        record = anime.tmdb
        if anime.ova or record is None or not record.id.strip():
            return {}
        if not self.template_uses_episode_title:
            return {}
        return await self.fetch_episode_titles(record, anime.season)

    async def fetch_episode_titles(
        self, record: Optional[MediaRecord], season: int
    ) -> dict[int, str]:
        """
        Recupere les titres d'une saison sans condition de template.

        Seuls les episodes dont season_number egale la saison demandee sont
        conserves. Un numero d'episode en double garde le dernier titre.
        """
        if record is None or not record.id.strip():
            return {}

        try:
            episodes = await self._client.get_season_episodes(record.id, season)
        except Exception as e:
            logger.opt(exception=e).error(
                f"Titres d'episodes indisponibles pour tmdb {record.id} saison {season}: {e}"
            )
            return {}

        titles: dict[int, str] = {}
        for episode in episodes:
            if episode.season_number != season:
                continue
            titles[episode.episode_number] = episode.name

        logger.debug(f"{len(titles)} titre(s) d'episode pour tmdb {record.id} saison {season}")
        return titles

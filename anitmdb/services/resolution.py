"""
Service de resolution d'un anime vers sa fiche TMDB.

Orchestration : normalisation du titre -> recherche avec repli ->
filtre Animation -> choix de la fiche -> stockage sur l'anime -> nom d'affichage.

Toutes les resolutions du processus sont serialisees par un verrou unique,
detenu au niveau du module et partage par toutes les instances du service.
Le verrou couvre la totalite de l'appel, pause de repli et requetes comprises.
"""

import asyncio
import weakref
from typing import Optional

from loguru import logger

from anitmdb.core.entities import Anime
from anitmdb.core.value_objects import MediaRecord
from anitmdb.services.candidate_ranker import CandidateRanker
from anitmdb.services.catalog_search import CatalogSearchService
from anitmdb.services.title_normalizer import normalize_title

# Un verrou par boucle d'evenements : asyncio.Lock est lie a sa boucle
_RESOLUTION_LOCKS: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


def resolution_lock() -> asyncio.Lock:
    """Retourne le verrou de resolution de la boucle courante."""
    loop = asyncio.get_running_loop()
    lock = _RESOLUTION_LOCKS.get(loop)
    if lock is None:
        lock = _RESOLUTION_LOCKS[loop] = asyncio.Lock()
    return lock


def format_display_name(
    record: Optional[MediaRecord],
    had_year: bool,
    expose_tmdb_id: bool,
) -> str:
    """
    Formate le nom d'affichage d'une fiche.

    Format : Nom [(Annee)] [[tmdbid=ID]]

    Args:
        record: Fiche resolue (None -> chaine vide)
        had_year: Le titre brut portait une annee
        expose_tmdb_id: Ajouter l'ID TMDB

    Returns:
        Nom formate, ou "" si pas de fiche ou nom vide
    """
    if record is None or not record.name.strip():
        return ""

    name = record.name
    if had_year and record.year is not None:
        name = f"{name} ({record.year})"
    if expose_tmdb_id:
        name = f"{name} [tmdbid={record.id}]"
    return name


class ResolutionService:
    """
    Resout les animes vers TMDB sous un verrou global.

    Example:
        service = container.resolution_service()
        name = await service.resolve_display_name(anime)
        # anime.tmdb contient maintenant la fiche (ou None)
    """

    def __init__(
        self,
        search: CatalogSearchService,
        ranker: CandidateRanker,
        expose_tmdb_id: bool = False,
    ) -> None:
        self._search = search
        self._ranker = ranker
        self._expose_tmdb_id = expose_tmdb_id

    async def resolve(self, anime: Anime) -> Optional[MediaRecord]:
        """
        Resout l'anime et stocke la fiche via anime.set_tmdb().

        Ne leve jamais : une erreur est journalisee et traitee comme
        "aucun resultat".
        """
        async with resolution_lock():
            return await self._resolve_unlocked(anime, normalize_title(anime.title).title)

    async def resolve_display_name(self, anime: Anime) -> str:
        """
        Resout l'anime et retourne son nom d'affichage.

        Returns:
            Nom formate, ou "" si le titre est vide ou sans correspondance
        """
        async with resolution_lock():
            normalized = normalize_title(anime.title)
            record = await self._resolve_unlocked(anime, normalized.title)
            return format_display_name(record, normalized.had_year, self._expose_tmdb_id)

    async def _resolve_unlocked(self, anime: Anime, title: str) -> Optional[MediaRecord]:
        if not title:
            # Titre vide ou annee seule : aucune requete, fiche inchangee
            return None

        media_type = anime.media_type
        try:
            outcome = await self._search.search(title, media_type)
            record = self._ranker.pick(outcome.hits, outcome.query) if outcome else None
        except Exception as e:
            logger.opt(exception=e).error(f"Resolution TMDB en echec pour '{title}': {e}")
            record = None

        anime.set_tmdb(record)
        if record is not None:
            logger.info(f"'{title}' resolu vers tmdb {record.id} ({record.name})")
        return record

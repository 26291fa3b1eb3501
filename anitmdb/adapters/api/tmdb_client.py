"""
Client TMDB pour la recherche d'animes et la recuperation des episodes.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Chaque methode emet exactement une requete (hors relances sur 429) :
le retrecissement de la requete et le filtrage par genre sont faits
par les services.

Usage:
    client = TMDBClient(api_key="your_key", language="zh-CN")
    hits = await client.search("Frieren", MediaType.TV)
    episodes = await client.get_season_episodes("209867", 1)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from anitmdb.adapters.api.errors import ParseError
from anitmdb.adapters.api.retry import request_with_retry
from anitmdb.core.ports.api_clients import ICatalogClient
from anitmdb.core.value_objects import EpisodeEntry, MediaType, SearchHit
from anitmdb.utils.constants import REQUEST_TIMEOUT_SECONDS, TMDB_BASE_URL


def _require(item: dict, key: str) -> Any:
    """Retourne item[key] ou leve ParseError si la cle est absente ou nulle."""
    value = item.get(key)
    if value is None:
        raise ParseError(f"champ '{key}' manquant dans la reponse TMDB")
    return value


def _as_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"champ '{key}' non entier: {value!r}") from e


class TMDBClient(ICatalogClient):
    """
    Client API TMDB pour la resolution des titres d'anime.

    Implemente ICatalogClient avec:
    - Recherche par titre sur search/tv ou search/movie (contenu adulte inclus)
    - Liste des episodes d'une saison (tv/{id}/season/{season})
    - Retry automatique sur rate limiting (429)
    - Timeout fixe (5 secondes par defaut)

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
    """

    TMDB_BASE_URL = TMDB_BASE_URL

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "zh-CN",
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
            language: Code langue des resultats (ex: "zh-CN", "fr-FR")
            timeout: Timeout de chaque requete en secondes
            max_attempts: Tentatives maximum sur reponse 429
        """
        self._api_key = api_key or ""
        self._language = language
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        - Sans cle : requete non authentifiee (TMDB repond 401)
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {}

            if len(self._api_key) > 40:
                headers["Authorization"] = f"Bearer {self._api_key}"
            elif self._api_key:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    def _common_params(self) -> dict[str, str]:
        return {"include_adult": "true", "language": self._language}

    async def _get_json(self, url: str, params: dict[str, str]) -> dict:
        response = await request_with_retry(
            self._get_client(),
            "GET",
            url,
            max_attempts=self._max_attempts,
            params=params,
        )
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"reponse JSON invalide pour {url}") from e
        if not isinstance(data, dict):
            raise ParseError(f"objet JSON attendu pour {url}")
        return data

    async def search(self, query: str, media_type: MediaType) -> list[SearchHit]:
        """
        Recherche des animes par titre.

        Args:
            query: Titre a rechercher (les espaces sont conserves)
            media_type: TV ou MOVIE

        Returns:
            Liste de SearchHit dans l'ordre de pertinence TMDB (vide si aucun resultat)

        Raises:
            TransportError: statut non 2xx, 429 persistant ou erreur reseau
            ParseError: tableau "results" absent ou resultat malforme
        """
        params = {"query": query, **self._common_params()}
        data = await self._get_json(f"/search/{media_type.value}", params)

        results = data.get("results")
        if not isinstance(results, list):
            raise ParseError("tableau 'results' manquant dans la reponse TMDB")

        hits = [self._parse_hit(item) for item in results]
        logger.debug(f"TMDB search/{media_type.value} '{query}' : {len(hits)} resultat(s)")
        return hits

    @staticmethod
    def _parse_hit(item: Any) -> SearchHit:
        """Convertit un resultat brut en SearchHit (series: name/first_air_date)."""
        if not isinstance(item, dict):
            raise ParseError("resultat TMDB non objet")

        # Series : "name" / "first_air_date" ; films : "title" / "release_date"
        name = item.get("name")
        if name is None:
            name = _require(item, "title")

        release_date = item.get("first_air_date")
        if release_date is None:
            release_date = item.get("release_date")

        genre_ids = item.get("genre_ids")
        if not isinstance(genre_ids, list):
            genre_ids = []

        return SearchHit(
            id=str(_require(item, "id")),
            name=str(name),
            release_date=release_date or None,
            genre_ids=tuple(_as_int(g, "genre_ids") for g in genre_ids),
        )

    async def get_season_episodes(self, tv_id: str, season: int) -> list[EpisodeEntry]:
        """
        Recupere les episodes d'une saison.

        Args:
            tv_id: ID TMDB de la serie
            season: Numero de saison

        Returns:
            Episodes bruts (le filtrage par saison est fait par l'appelant)

        Raises:
            TransportError: statut non 2xx ou erreur reseau
            ParseError: tableau "episodes" absent ou episode malforme
        """
        data = await self._get_json(f"/tv/{tv_id}/season/{season}", self._common_params())

        episodes = data.get("episodes")
        if not isinstance(episodes, list):
            raise ParseError("tableau 'episodes' manquant dans la reponse TMDB")

        entries = []
        for item in episodes:
            if not isinstance(item, dict):
                raise ParseError("episode TMDB non objet")
            entries.append(
                EpisodeEntry(
                    season_number=_as_int(_require(item, "season_number"), "season_number"),
                    episode_number=_as_int(_require(item, "episode_number"), "episode_number"),
                    name=str(_require(item, "name")),
                )
            )
        return entries

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

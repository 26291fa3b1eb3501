"""
Tests pour EpisodeTitleService - titres d'episodes best-effort.

Verifie:
- Seuls les episodes de la saison demandee sont conserves
- Le dernier titre l'emporte pour un numero en double
- Aucun appel reseau pour film/OVA, sans fiche, ID vide ou template sans placeholder
- Toute erreur donne une table vide
"""

from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from anitmdb.adapters.api.errors import ParseError, TransportError
from anitmdb.adapters.api.tmdb_client import TMDBClient
from anitmdb.core.entities import Anime
from anitmdb.core.value_objects import EpisodeEntry, MediaRecord
from anitmdb.services.episode_titles import EpisodeTitleService
from tests.fixtures.tmdb_responses import TMDB_SEASON_MALFORMED_RESPONSE, TMDB_SEASON_RESPONSE

TEMPLATE_WITH_TITLE = "${title} S${seasonFormat}E${episodeFormat} ${episodeTitle}"
TEMPLATE_WITHOUT_TITLE = "${title} S${seasonFormat}E${episodeFormat}"

FRIEREN = MediaRecord(id="209867", name="葬送的芙莉莲")


@pytest.fixture
def service(mock_catalog_client: AsyncMock) -> EpisodeTitleService:
    return EpisodeTitleService(client=mock_catalog_client, rename_template=TEMPLATE_WITH_TITLE)


class TestFetchEpisodeTitles:
    """Tests pour fetch_episode_titles()."""

    @pytest.mark.asyncio
    async def test_other_seasons_are_discarded(
        self, service: EpisodeTitleService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.get_season_episodes.return_value = [
            EpisodeEntry(2, 1, "S2E1"),
            EpisodeEntry(2, 2, "S2E2"),
            EpisodeEntry(0, 1, "Special"),
            EpisodeEntry(1, 12, "S1E12"),
        ]

        titles = await service.fetch_episode_titles(FRIEREN, 2)

        assert titles == {1: "S2E1", 2: "S2E2"}
        mock_catalog_client.get_season_episodes.assert_awaited_once_with("209867", 2)

    @pytest.mark.asyncio
    async def test_duplicate_episode_number_keeps_last(
        self, service: EpisodeTitleService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.get_season_episodes.return_value = [
            EpisodeEntry(1, 1, "First"),
            EpisodeEntry(1, 1, "Second"),
        ]

        assert await service.fetch_episode_titles(FRIEREN, 1) == {1: "Second"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [TransportError(500), ParseError("bad"), RuntimeError("x")])
    async def test_errors_give_empty_map(
        self, service: EpisodeTitleService, mock_catalog_client: AsyncMock, error
    ):
        mock_catalog_client.get_season_episodes.side_effect = error

        assert await service.fetch_episode_titles(FRIEREN, 1) == {}

    @pytest.mark.asyncio
    async def test_blank_id_makes_no_call(
        self, service: EpisodeTitleService, mock_catalog_client: AsyncMock
    ):
        assert await service.fetch_episode_titles(MediaRecord(id=" ", name="X"), 1) == {}
        mock_catalog_client.get_season_episodes.assert_not_awaited()


class TestGetEpisodeTitleMap:
    """Tests pour get_episode_title_map() (conditions de saut)."""

    @pytest.mark.asyncio
    async def test_series_with_record_fetches_current_season(
        self, service: EpisodeTitleService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.get_season_episodes.return_value = [EpisodeEntry(3, 1, "Ep1")]
        anime = Anime(title="Frieren", season=3, tmdb=FRIEREN)

        assert await service.get_episode_title_map(anime) == {1: "Ep1"}
        mock_catalog_client.get_season_episodes.assert_awaited_once_with("209867", 3)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "anime",
        [
            Anime(title="Suzume", ova=True, tmdb=MediaRecord(id="916224", name="Suzume")),
            Anime(title="Frieren", tmdb=None),
            Anime(title="Frieren", tmdb=MediaRecord(id="", name="Frieren")),
        ],
    )
    async def test_skipped_without_network_call(
        self, service: EpisodeTitleService, mock_catalog_client: AsyncMock, anime: Anime
    ):
        assert await service.get_episode_title_map(anime) == {}
        mock_catalog_client.get_season_episodes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_skipped_when_template_has_no_placeholder(self, mock_catalog_client: AsyncMock):
        service = EpisodeTitleService(
            client=mock_catalog_client, rename_template=TEMPLATE_WITHOUT_TITLE
        )

        result = await service.get_episode_title_map(Anime(title="Frieren", tmdb=FRIEREN))

        assert result == {}
        mock_catalog_client.get_season_episodes.assert_not_awaited()


class TestEpisodeTitlesWithHttp:
    """Bout en bout avec le vrai client et respx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_season_payload_is_filtered(self):
        respx.get("https://api.themoviedb.org/3/tv/209867/season/1").mock(
            return_value=httpx.Response(200, json=TMDB_SEASON_RESPONSE)
        )
        client = TMDBClient(api_key="test_api_key")
        service = EpisodeTitleService(client=client, rename_template=TEMPLATE_WITH_TITLE)

        titles = await service.fetch_episode_titles(FRIEREN, 1)

        assert titles == {1: "冒险的结束", 2: "不是魔法也好", 3: "杀人魔法"}
        await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_payload_gives_empty_map(self):
        respx.get("https://api.themoviedb.org/3/tv/209867/season/1").mock(
            return_value=httpx.Response(200, json=TMDB_SEASON_MALFORMED_RESPONSE)
        )
        client = TMDBClient(api_key="test_api_key")
        service = EpisodeTitleService(client=client, rename_template=TEMPLATE_WITH_TITLE)

        assert await service.fetch_episode_titles(FRIEREN, 1) == {}
        await client.close()

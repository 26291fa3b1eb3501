"""
Tests pour CatalogSearchService - recherche avec retrecissement.

Verifie:
- Les resultats non Animation sont ignores
- Sans resultat, la requete est reduite a son premier mot, puis abandonnee
- La pause de courtoisie precede la relance
- Les erreurs du client remontent sans relance
"""

from unittest.mock import AsyncMock, call, patch

import pytest

from anitmdb.adapters.api.errors import TransportError
from anitmdb.core.value_objects import MediaType
from anitmdb.services.catalog_search import CatalogSearchService, narrow_query
from tests.fixtures.factories import make_hit


@pytest.fixture
def search_service(mock_catalog_client: AsyncMock) -> CatalogSearchService:
    return CatalogSearchService(client=mock_catalog_client, narrowing_delay=0)


class TestNarrowQuery:
    @pytest.mark.parametrize(
        "query,expected",
        [
            ("Ore dake Level Up na Ken", "Ore"),
            ("Frieren Season", "Frieren"),
            ("Frieren", None),
            ("Frieren   2nd", "Frieren"),
            ("  Frieren 2nd Season", "Frieren"),
        ],
    )
    def test_narrow_query(self, query, expected):
        assert narrow_query(query) == expected


class TestCatalogSearch:
    """Tests pour CatalogSearchService.search()."""

    @pytest.mark.asyncio
    async def test_returns_animation_hits_of_first_query(
        self, search_service: CatalogSearchService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.search.return_value = [
            make_hit("1", "Live", genre_ids=(18,)),
            make_hit("2", "Frieren"),
        ]

        outcome = await search_service.search("Frieren", MediaType.TV)

        assert outcome.query == "Frieren"
        assert [h.id for h in outcome.hits] == ["2"]
        mock_catalog_client.search.assert_awaited_once_with("Frieren", MediaType.TV)

    @pytest.mark.asyncio
    async def test_only_non_animation_hit_is_not_found(
        self, search_service: CatalogSearchService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.search.return_value = [make_hit("1", "Frieren", genre_ids=(18,))]

        assert await search_service.search("Frieren", MediaType.TV) is None
        assert mock_catalog_client.search.await_count == 1

    @pytest.mark.asyncio
    async def test_multi_word_title_falls_back_to_first_word_once(
        self, search_service: CatalogSearchService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.search.return_value = []

        outcome = await search_service.search("a b c d", MediaType.TV)

        assert outcome is None
        assert mock_catalog_client.search.await_args_list == [
            call("a b c d", MediaType.TV),
            call("a", MediaType.TV),
        ]

    @pytest.mark.asyncio
    async def test_intermediate_query_is_never_searched(
        self, search_service: CatalogSearchService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.search.side_effect = [
            [],
            [make_hit("2", "A")],
        ]

        outcome = await search_service.search("A B C", MediaType.TV)

        assert outcome.query == "A"
        assert outcome.hits[0].id == "2"
        assert mock_catalog_client.search.await_args_list == [
            call("A B C", MediaType.TV),
            call("A", MediaType.TV),
        ]

    @pytest.mark.asyncio
    async def test_narrowed_query_is_returned_with_hits(
        self, search_service: CatalogSearchService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.search.side_effect = [
            [make_hit("9", "Noise", genre_ids=())],
            [make_hit("2", "Kaiju")],
        ]

        outcome = await search_service.search("Kaiju No.8", MediaType.MOVIE)

        assert outcome.query == "Kaiju"
        assert outcome.hits[0].id == "2"
        assert mock_catalog_client.search.await_args_list[1] == call("Kaiju", MediaType.MOVIE)

    @pytest.mark.asyncio
    async def test_sleeps_between_attempts(self, mock_catalog_client: AsyncMock):
        service = CatalogSearchService(client=mock_catalog_client)

        with patch(
            "anitmdb.services.catalog_search.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            await service.search("one two three", MediaType.TV)

        assert mock_sleep.await_args_list == [call(0.5)]

    @pytest.mark.asyncio
    async def test_transport_error_propagates_without_retry(
        self, search_service: CatalogSearchService, mock_catalog_client: AsyncMock
    ):
        mock_catalog_client.search.side_effect = TransportError(503)

        with pytest.raises(TransportError):
            await search_service.search("one two", MediaType.TV)

        assert mock_catalog_client.search.await_count == 1

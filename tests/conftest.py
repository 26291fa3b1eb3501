"""
Fixtures pytest partagees pour les tests AniTMDB.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du port ICatalogClient
"""

from unittest.mock import AsyncMock

import pytest

from anitmdb.core.ports.api_clients import ICatalogClient


@pytest.fixture
def mock_catalog_client() -> AsyncMock:
    """
    Mock de ICatalogClient pour les tests.

    search() et get_season_episodes() renvoient une liste vide par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = AsyncMock(spec=ICatalogClient)
    mock.search.return_value = []
    mock.get_season_episodes.return_value = []
    return mock

"""
Mecanisme de retry avec backoff exponentiel pour l'API TMDB.

Gere automatiquement les erreurs 429 (rate limiting) en relancant
les requetes avec un delai croissant et du jitter aleatoire. Toute autre
erreur HTTP ou reseau est convertie en TransportError sans retry.

Usage:
    response = await request_with_retry(client, "GET", "/search/tv", params=...)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from anitmdb.adapters.api.errors import TransportError


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _log_retry(retry_state: RetryCallState) -> None:
    logger.debug(
        f"Rate limit TMDB, tentative {retry_state.attempt_number} echouee, nouvel essai"
    )


def with_retry(max_attempts: int = 3, max_wait: int = 10):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 10)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    max_wait: int = 10,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler (relative a la base_url du client)
        max_attempts: Nombre maximum de tentatives sur 429
        max_wait: Delai maximum entre deux tentatives (secondes)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes (2xx)

    Raises:
        TransportError: 429 apres epuisement des tentatives, autre statut
            non 2xx, ou erreur reseau/timeout
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        return response

    try:
        response = await _do_request()
    except RateLimitError as e:
        raise TransportError(429, str(e)) from e
    except httpx.HTTPError as e:
        raise TransportError(None, f"{type(e).__name__}: {e}") from e

    if not response.is_success:
        raise TransportError(response.status_code)
    return response

"""
Star Wars API Client for the Species Listing Frontend.

Fetches a film and, concurrently, every species the film references.
Failures collapse into FetchError; nothing is retried unless configured.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from frontend.config.settings import config, SpeciesViewerConfig
from frontend.utils.exceptions import FetchError, FetchErrorKind

logger = logging.getLogger(__name__)

FILM_ERROR_MESSAGE = "There was an error fetching the film."
SPECIES_ERROR_MESSAGE = "There were one or more than one species that couldn't be fetched."


@dataclass(frozen=True)
class Film:
    """Film resource as returned by the API."""
    url: Optional[str] = None
    title: Optional[str] = None
    episode_id: Optional[int] = None
    # None when the payload has no species list (e.g. {"detail": "Not found"})
    species: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Film":
        if not isinstance(payload, dict):
            return cls()
        species = payload.get('species')
        return cls(
            url=payload.get('url'),
            title=payload.get('title'),
            episode_id=payload.get('episode_id'),
            species=tuple(species) if isinstance(species, list) else None,
        )


@dataclass(frozen=True)
class Species:
    """Species resource as returned by the API.

    Every field is optional; defaults for display are applied by the
    species card builder, not here.
    """
    name: Optional[str] = None
    classification: Optional[str] = None
    designation: Optional[str] = None
    average_height: Any = None
    language: Optional[str] = None
    films: Optional[Tuple[str, ...]] = None
    url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Species":
        if not isinstance(payload, dict):
            return cls()
        films = payload.get('films')
        return cls(
            name=payload.get('name'),
            classification=payload.get('classification'),
            designation=payload.get('designation'),
            average_height=payload.get('average_height'),
            language=payload.get('language'),
            films=tuple(films) if isinstance(films, list) else None,
            url=payload.get('url'),
        )


def _error_kind(error: Exception) -> FetchErrorKind:
    """Classify a low-level failure for logging."""
    if isinstance(error, FetchError):
        return error.kind
    if isinstance(error, requests.exceptions.RequestException) and not isinstance(error, ValueError):
        return FetchErrorKind.NETWORK
    if isinstance(error, ValueError):
        return FetchErrorKind.PARSE
    return FetchErrorKind.NETWORK


class SwapiClient:
    """Client for the Star Wars API films and species resources."""

    def __init__(
        self,
        settings: SpeciesViewerConfig = None,
        session: requests.Session = None
    ):
        """Initialize API client.

        Args:
            settings: Configuration (default: module config)
            session: Preconfigured requests session (default: new session)
        """
        self.settings = settings or config
        self.timeout = self.settings.API_TIMEOUT_SECONDS
        self.max_workers = max(1, self.settings.MAX_WORKERS)

        if session is None:
            session = requests.Session()
            # raise_on_status=False keeps error bodies flowing to the parser
            retry_strategy = Retry(
                total=self.settings.MAX_RETRY_ATTEMPTS,
                backoff_factor=0.5,
                status_forcelist=[500, 502, 503, 504],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def _get(self, url: str) -> requests.Response:
        """Issue a GET request. HTTP status is not inspected."""
        logger.debug(f"GET {url}")
        return self.session.get(url, timeout=self.timeout)

    @staticmethod
    def _parse(response: requests.Response) -> Any:
        return response.json()

    def _gather(self, func: Callable[[Any], Any], items: Sequence[Any]) -> List[Any]:
        """Run func over items concurrently and join on all of them.

        Results keep the order of items. The first failure (in input order)
        is raised after every task has settled.
        """
        if not items:
            return []

        results: List[Any] = [None] * len(items)
        errors: List[Optional[Exception]] = [None] * len(items)

        with ThreadPoolExecutor(max_workers=min(len(items), self.max_workers)) as executor:
            futures = {executor.submit(func, item): i for i, item in enumerate(items)}

            for future in as_completed(futures):
                idx = futures[future]
                try:
                    results[idx] = future.result()
                except Exception as e:
                    errors[idx] = e

        for error in errors:
            if error is not None:
                raise error

        return results

    def fetch_film(self, film_id=None) -> Optional[Film]:
        """Fetch a film by identifier.

        Args:
            film_id: Film identifier; falsy values skip the request

        Returns:
            Film, or None when no identifier was given

        Raises:
            FetchError: On any network or parse failure
        """
        if not film_id:
            return None

        url = self.settings.film_url(film_id)
        try:
            payload = self._parse(self._get(url))
        except (requests.exceptions.RequestException, ValueError) as e:
            kind = _error_kind(e)
            logger.error(f"{FILM_ERROR_MESSAGE} ({kind.value}: {e})")
            raise FetchError(FILM_ERROR_MESSAGE, kind=kind, url=url) from None

        return Film.from_payload(payload)

    def fetch_species_for_film(self, film_id=None) -> Optional[List[Species]]:
        """Fetch every species referenced by a film.

        All species requests are dispatched at once; the call returns only
        when every one of them has completed. Any failure discards the batch.

        Args:
            film_id: Film identifier; falsy values skip the request

        Returns:
            Species in the order the film references them, or None when no
            identifier was given

        Raises:
            FetchError: If the film or any species cannot be fetched or parsed
        """
        if not film_id:
            return None

        try:
            film = self.fetch_film(film_id)
            if film.species is None:
                raise FetchError(
                    f"Film {film_id} has no species list",
                    kind=FetchErrorKind.NOT_FOUND,
                    url=self.settings.film_url(film_id),
                )

            responses = self._gather(self._get, film.species)
            payloads = self._gather(self._parse, responses)
        except Exception as e:
            kind = _error_kind(e)
            logger.error(f"{SPECIES_ERROR_MESSAGE} ({kind.value}: {e})")
            raise FetchError(str(e), kind=kind, url=getattr(e, 'url', None)) from None

        species = [Species.from_payload(payload) for payload in payloads]
        logger.info(f"Fetched {len(species)} species for film {film_id}")
        return species


# Singleton pattern with thread-safe initialization
_swapi_client: Optional[SwapiClient] = None
_swapi_client_lock = threading.Lock()


def get_swapi_client() -> SwapiClient:
    """Get singleton API client instance (thread-safe)."""
    global _swapi_client
    if _swapi_client is None:
        with _swapi_client_lock:
            if _swapi_client is None:
                _swapi_client = SwapiClient()
    return _swapi_client

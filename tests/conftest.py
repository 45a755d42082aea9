"""
Shared test fixtures for species listing tests.
"""
import pytest
from unittest.mock import MagicMock

from frontend.config.settings import SpeciesViewerConfig

BASE_URL = "https://swapi.test/api/films/"
FILM_URL = "https://swapi.test/api/films/2/"

SPECIES_URLS = [
    "https://swapi.test/api/species/6/",
    "https://swapi.test/api/species/7/",
    "https://swapi.test/api/species/3/",
    "https://swapi.test/api/species/2/",
    "https://swapi.test/api/species/1/",
]


class RecordingState(dict):
    """Session state stand-in that records every assignment."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.history = []

    def __setitem__(self, key, value):
        self.history.append((key, value))
        super().__setitem__(key, value)

    def values_of(self, key):
        return [value for k, value in self.history if k == key]


def make_response(payload=None, json_error=None):
    """Build a fake requests.Response returning payload from .json()."""
    response = MagicMock()
    response.status_code = 200
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(routes):
    """Build a fake session whose get() serves routes[url].

    Route values may be a response or an exception to raise.
    """
    session = MagicMock()

    def _get(url, timeout=None):
        route = routes[url]
        if isinstance(route, Exception):
            raise route
        return route

    session.get.side_effect = _get
    return session


@pytest.fixture
def settings():
    """Configuration pointing at a fake API host."""
    return SpeciesViewerConfig(
        API_BASE_URL=BASE_URL,
        API_TIMEOUT_SECONDS=None,
        MAX_RETRY_ATTEMPTS=0,
        MAX_WORKERS=16,
        FILM_ID=2,
        HEIGHT_DECIMALS=0,
    )


@pytest.fixture
def film_payload():
    """Film payload as served by the API (trimmed)."""
    return {
        "title": "The Empire Strikes Back",
        "episode_id": 5,
        "species": list(SPECIES_URLS),
        "url": FILM_URL,
    }


@pytest.fixture
def species_payloads():
    """Species payloads keyed by URL, in film order."""
    return {
        SPECIES_URLS[0]: {
            "name": "Yoda's species", "classification": "mammal", "designation": "sentient",
            "average_height": "66", "language": "Galactic basic",
            "films": ["f1", "f2", "f3", "f4", "f5"], "url": SPECIES_URLS[0],
        },
        SPECIES_URLS[1]: {
            "name": "Trandoshan", "classification": "reptile", "designation": "sentient",
            "average_height": "200", "language": "Dosh",
            "films": ["f2"], "url": SPECIES_URLS[1],
        },
        SPECIES_URLS[2]: {
            "name": "Wookie", "classification": "mammal", "designation": "sentient",
            "average_height": "210", "language": "Shyriiwook",
            "films": ["f1", "f2"], "url": SPECIES_URLS[2],
        },
        SPECIES_URLS[3]: {
            "name": "Droid", "classification": "artificial", "designation": "sentient",
            "average_height": "n/a", "language": "n/a",
            "films": ["f1", "f2", "f3"], "url": SPECIES_URLS[3],
        },
        SPECIES_URLS[4]: {
            "name": "Human", "classification": "mammal", "designation": "sentient",
            "average_height": "180", "language": "Galactic Basic",
            "films": ["f1", "f2", "f3", "f4"], "url": SPECIES_URLS[4],
        },
    }


@pytest.fixture
def routes(film_payload, species_payloads):
    """URL -> fake response for a successful load."""
    table = {FILM_URL: make_response(film_payload)}
    for url, payload in species_payloads.items():
        table[url] = make_response(payload)
    return table


@pytest.fixture
def recording_state():
    """Fresh recording session state."""
    return RecordingState()


@pytest.fixture
def species_urls():
    """Species URLs referenced by the film, in order."""
    return list(SPECIES_URLS)


@pytest.fixture
def response_factory():
    """Factory for fake responses."""
    return make_response


@pytest.fixture
def session_factory():
    """Factory for fake sessions serving a route table."""
    return make_session

"""Services for the species listing frontend."""
from frontend.services.swapi_client import (
    SwapiClient,
    get_swapi_client,
    Film,
    Species,
    FILM_ERROR_MESSAGE,
    SPECIES_ERROR_MESSAGE,
)

__all__ = [
    # Star Wars API client
    "SwapiClient",
    "get_swapi_client",
    "Film",
    "Species",
    "FILM_ERROR_MESSAGE",
    "SPECIES_ERROR_MESSAGE",
]

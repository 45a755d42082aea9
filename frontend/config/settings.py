"""
Species Listing Frontend Configuration.

Frozen dataclass for immutable configuration with environment overrides.
All magic numbers and configuration values should be defined here.

Environment variables can override defaults (read at module import time):
- SWAPI_BASE_URL: Films endpoint of the Star Wars API
- FILM_ID: Film whose species are listed
- API_TIMEOUT_SECONDS: Request timeout (unset means no timeout)
- MAX_RETRY_ATTEMPTS: Automatic retries on 5xx (0 disables retries)
- MAX_WORKERS: Upper bound for concurrent species requests
- HEIGHT_DECIMALS: Fractional digits shown for heights in inches
- LOG_LEVEL: Root logging level
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


def _get_int_env(name: str, default: int) -> int:
    """Get integer environment variable or return default."""
    val = os.getenv(name)
    if val is not None:
        try:
            return int(val)
        except ValueError:
            pass
    return default


def _get_optional_float_env(name: str, default: Optional[float] = None) -> Optional[float]:
    """Get float environment variable, None when unset or blank."""
    val = os.getenv(name)
    if val is not None and val.strip():
        try:
            return float(val)
        except ValueError:
            pass
    return default


def _get_str_env(name: str, default: str) -> str:
    """Get string environment variable or return default."""
    return os.getenv(name, default)


# Static images served by the Star Wars wiki
SPECIES_IMAGES: Dict[str, str] = {
    'droid': 'https://static.wikia.nocookie.net/starwars/images/f/fb/Droid_Trio_TLJ_alt.png',
    'human': 'https://static.wikia.nocookie.net/starwars/images/3/3f/HumansInTheResistance-TROS.jpg',
    'trandoshan': 'https://static.wikia.nocookie.net/starwars/images/7/72/Bossk_full_body.png',
    'wookie': 'https://static.wikia.nocookie.net/starwars/images/1/1e/Chewbacca-Fathead.png',
    'yoda': 'https://static.wikia.nocookie.net/starwars/images/d/d6/Yoda_SWSB.png',
}

# Species names as returned by the API -> keys of SPECIES_IMAGES
SPECIES_IMAGE_KEYS: Dict[str, str] = {
    'Droid': 'droid',
    'Human': 'human',
    'Trandoshan': 'trandoshan',
    'Wookie': 'wookie',
    "Yoda's species": 'yoda',
}


@dataclass(frozen=True)
class SpeciesViewerConfig:
    """Immutable species listing configuration.

    frozen=True ensures config values cannot be accidentally modified.
    Environment variables are read at module import time.
    """

    # Application
    APP_NAME: str = "Species Listing"
    APP_ICON: str = "🛸"
    APP_TITLE: str = "Empire Strikes Back - Species Listing"
    APP_VERSION: str = field(
        default_factory=lambda: _get_str_env('APP_VERSION', "1.0.0")
    )

    # Star Wars API
    API_BASE_URL: str = field(
        default_factory=lambda: _get_str_env('SWAPI_BASE_URL', 'https://swapi.dev/api/films/')
    )
    API_TIMEOUT_SECONDS: Optional[float] = field(
        default_factory=lambda: _get_optional_float_env('API_TIMEOUT_SECONDS')
    )
    MAX_RETRY_ATTEMPTS: int = field(
        default_factory=lambda: _get_int_env('MAX_RETRY_ATTEMPTS', 0)
    )
    MAX_WORKERS: int = field(
        default_factory=lambda: _get_int_env('MAX_WORKERS', 16)
    )

    # The Empire Strikes Back
    FILM_ID: int = field(
        default_factory=lambda: _get_int_env('FILM_ID', 2)
    )

    # Unit conversion (cm -> in)
    CM_TO_IN_CONVERSION_RATIO: float = 0.3937
    HEIGHT_DECIMALS: int = field(
        default_factory=lambda: _get_int_env('HEIGHT_DECIMALS', 0)
    )

    # UI settings
    CARD_COLUMNS: int = 3
    NOT_AVAILABLE: str = "n/a"

    # Logging
    LOG_LEVEL: str = field(
        default_factory=lambda: _get_str_env('LOG_LEVEL', 'INFO').upper()
    )

    SPECIES_IMAGES: Dict[str, str] = field(
        default_factory=lambda: dict(SPECIES_IMAGES)
    )

    @property
    def SPECIES_IMAGE_MAP(self) -> Dict[str, str]:
        """Get species name -> image URL lookup table."""
        return {
            name: self.SPECIES_IMAGES[key]
            for name, key in SPECIES_IMAGE_KEYS.items()
            if key in self.SPECIES_IMAGES
        }

    def film_url(self, film_id) -> str:
        """Build the resource URL of a film."""
        return f"{self.API_BASE_URL.rstrip('/')}/{film_id}/"


# Global immutable config instance
config = SpeciesViewerConfig()

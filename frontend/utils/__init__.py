"""Utilities for the species listing frontend."""
from frontend.utils.session_state import (
    SessionState,
    LoadPhase,
)
from frontend.utils.exceptions import (
    SpeciesViewerError,
    FetchError,
    FetchErrorKind,
)
from frontend.utils.units import convert_height

__all__ = [
    # Session state
    "SessionState",
    "LoadPhase",
    # Exceptions
    "SpeciesViewerError",
    "FetchError",
    "FetchErrorKind",
    # Units
    "convert_height",
]

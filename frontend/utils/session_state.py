"""Session state management for the species listing frontend.

This module provides centralized session state management for Streamlit,
with features like:
- Default value initialization
- Type-safe access
- Load state tracking (is_fetching / has_error / species)
"""

import copy
import logging
from enum import Enum
from typing import Any, Dict, Callable

import streamlit as st

logger = logging.getLogger(__name__)


def _default_factory(value: Any) -> Callable[[], Any]:
    """Create a factory function that returns a deep copy of the value.

    This prevents mutable default values from being shared across sessions.
    """
    if isinstance(value, (list, dict, set)):
        return lambda: copy.deepcopy(value)
    return lambda: value


class LoadPhase(str, Enum):
    """Load phase derived from the stored flags."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SessionState:
    """Centralized session state management for the species listing.

    Example:
        >>> from frontend.utils import SessionState
        >>> SessionState.init_defaults()
        >>> SessionState.start_fetching()
        >>> SessionState.is_fetching()
        True
    """

    _DEFAULT_FACTORIES: Dict[str, Callable[[], Any]] = {
        # Load state
        'species_requested': _default_factory(False),
        'is_fetching': _default_factory(False),
        'has_error': _default_factory(False),
        'species': _default_factory([]),
    }

    @classmethod
    def _get_session_state(cls):
        """Get Streamlit session state (patched in tests)."""
        return st.session_state

    @classmethod
    def init_defaults(cls) -> None:
        """Initialize default session state values.

        Call this at the start of your Streamlit app to ensure
        all expected keys exist with sensible defaults.
        """
        session_state = cls._get_session_state()

        for key, factory in cls._DEFAULT_FACTORIES.items():
            if key not in session_state:
                session_state[key] = factory()
                logger.debug(f"Initialized session state key: {key}")

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a value from session state."""
        session_state = cls._get_session_state()
        return session_state.get(key, default)

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """Set a value in session state."""
        session_state = cls._get_session_state()
        session_state[key] = value
        logger.debug(f"Set session state: {key} = {type(value).__name__}")

    # Load state helpers
    @classmethod
    def mark_requested(cls) -> bool:
        """Record that the species load started.

        Returns:
            False if it had already been requested in this session
        """
        if cls.get('species_requested', False):
            return False
        cls.set('species_requested', True)
        return True

    @classmethod
    def is_fetching(cls) -> bool:
        return cls.get('is_fetching', False)

    @classmethod
    def has_error(cls) -> bool:
        return cls.get('has_error', False)

    @classmethod
    def get_species(cls) -> list:
        """Get loaded species (None is reported as empty)."""
        return cls.get('species') or []

    @classmethod
    def start_fetching(cls) -> None:
        cls.set('is_fetching', True)

    @classmethod
    def finish_fetching(cls, species) -> None:
        """Mark the load as succeeded with its result."""
        cls.set('is_fetching', False)
        cls.set('species', species)

    @classmethod
    def fail_fetching(cls) -> None:
        """Mark the load as failed; loaded species are left as they are."""
        cls.set('is_fetching', False)
        cls.set('has_error', True)

    @classmethod
    def get_phase(cls) -> LoadPhase:
        """Derive the load phase from the stored flags."""
        if cls.is_fetching():
            return LoadPhase.LOADING
        if cls.has_error():
            return LoadPhase.ERROR
        if cls.get('species_requested', False):
            return LoadPhase.SUCCESS
        return LoadPhase.IDLE

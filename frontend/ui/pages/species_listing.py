"""Species listing page.

Loads the species of one film on first render and shows them as cards.

Data flow:
- SpeciesViewController.mount() runs once per browser session
- Film -> species fan-out via SwapiClient
- Load flags live in SessionState; the page renders from them
"""

import logging
from typing import Optional

import streamlit as st

from frontend.config.settings import config
from frontend.services import SwapiClient, get_swapi_client
from frontend.utils import SessionState, LoadPhase
from frontend.ui.components import build_species_cards, render_species_grid

logger = logging.getLogger(__name__)

FETCHING_MESSAGE = "Fetching results..."
ERROR_MESSAGE = "Ups! Something went wrong. Please try again later."


class SpeciesViewController:
    """Orchestrates the one-shot species load and owns the load flags."""

    def __init__(
        self,
        client: Optional[SwapiClient] = None,
        state=SessionState,
        film_id=None
    ):
        """
        Args:
            client: API client (default: shared client)
            state: State store exposing the SessionState load helpers
            film_id: Film to load (default config.FILM_ID)
        """
        self.client = client or get_swapi_client()
        self.state = state
        self.film_id = film_id if film_id is not None else config.FILM_ID

    def mount(self) -> bool:
        """Load the film's species unless already requested this session.

        Returns:
            True if a load attempt was made
        """
        if not self.state.mark_requested():
            return False

        self.state.start_fetching()
        try:
            species = self.client.fetch_species_for_film(self.film_id)
        except Exception as e:
            self.state.fail_fetching()
            logger.error(f"Something went wrong. {e}")
            return True

        self.state.finish_fetching(species)
        return True

    def phase(self) -> LoadPhase:
        return self.state.get_phase()


def render_species_listing_page(controller: Optional[SpeciesViewController] = None) -> None:
    """Render the species listing page."""
    st.title(config.APP_TITLE)

    controller = controller or SpeciesViewController()

    if not controller.state.get('species_requested', False):
        with st.spinner(FETCHING_MESSAGE):
            controller.mount()

    phase = controller.phase()
    if phase == LoadPhase.LOADING:
        st.subheader(FETCHING_MESSAGE)
    elif phase == LoadPhase.ERROR:
        st.subheader(ERROR_MESSAGE)

    cards = build_species_cards(controller.state.get_species())
    if cards:
        render_species_grid(cards)

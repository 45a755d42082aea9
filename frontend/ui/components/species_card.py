"""Species card component for the species listing.

Maps API species records to flat card records and renders them in a grid.
"""

import html
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import streamlit as st

from frontend.config.settings import config
from frontend.services.swapi_client import Species
from frontend.utils.units import convert_height

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeciesCard:
    """Display record for one species card."""
    name: str
    classification: str
    designation: str
    height: str
    image: Optional[str]
    num_films: int
    language: str


def _or_not_available(value: Optional[str]) -> str:
    return value or config.NOT_AVAILABLE


def build_species_card(
    species: Species,
    image_map: Optional[Dict[str, str]] = None,
    decimals: Optional[int] = None
) -> SpeciesCard:
    """Build the card record for a species, substituting defaults.

    Args:
        species: Species from the API
        image_map: Species name -> image URL (default config.SPECIES_IMAGE_MAP)
        decimals: Fractional digits for the height (default config.HEIGHT_DECIMALS)

    Returns:
        SpeciesCard with "n/a" for missing text, 0 films when the film list
        is missing and no image when the name is not in the lookup table
    """
    if image_map is None:
        image_map = config.SPECIES_IMAGE_MAP
    if decimals is None:
        decimals = config.HEIGHT_DECIMALS

    return SpeciesCard(
        name=_or_not_available(species.name),
        classification=_or_not_available(species.classification),
        designation=_or_not_available(species.designation),
        height=convert_height(species.average_height, decimals),
        image=image_map.get(species.name),
        num_films=len(species.films) if isinstance(species.films, (list, tuple)) else 0,
        language=_or_not_available(species.language),
    )


def build_species_cards(
    species_list: Optional[Sequence[Species]],
    image_map: Optional[Dict[str, str]] = None
) -> List[SpeciesCard]:
    """Build cards for a species list; None yields no cards."""
    if not species_list:
        return []
    return [build_species_card(species, image_map=image_map) for species in species_list]


def render_species_card(card: SpeciesCard) -> None:
    """Render a single species card.

    Args:
        card: Card record built by build_species_card
    """
    safe_name = html.escape(card.name)

    with st.container(border=True):
        if card.image:
            st.image(card.image, width="stretch")
        else:
            st.markdown(
                "<div style='height: 200px; display: flex; align-items: center; justify-content: center; "
                "color: #888; font-size: 16px;'>Image not available</div>",
                unsafe_allow_html=True
            )

        st.markdown(
            f"<h3 style='text-align: center; margin: 8px 0;'>{safe_name}</h3>",
            unsafe_allow_html=True
        )

        rows = [
            ("Classification", card.classification),
            ("Designation", card.designation),
            ("Height", card.height),
            ("Language", card.language),
        ]
        details = "".join(
            f"<div style='display: flex; justify-content: space-between; font-size: 15px; margin: 4px 0;'>"
            f"<span><b>{label}:</b></span><span>{html.escape(str(value))}</span></div>"
            for label, value in rows
        )
        st.markdown(details, unsafe_allow_html=True)

        films_label = "film" if card.num_films == 1 else "films"
        st.caption(f"Appears in {card.num_films} {films_label}")


def render_species_grid(cards: List[SpeciesCard], columns: int = None) -> None:
    """Render species cards in a grid.

    Args:
        cards: Cards to render
        columns: Number of columns in the grid (default config.CARD_COLUMNS)
    """
    columns = columns or config.CARD_COLUMNS

    for row_start in range(0, len(cards), columns):
        row_cards = cards[row_start:row_start + columns]
        cols = st.columns(columns)

        for i, card in enumerate(row_cards):
            with cols[i]:
                render_species_card(card)

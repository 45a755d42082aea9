"""Reusable UI components for the species listing."""
from frontend.ui.components.species_card import (
    SpeciesCard,
    build_species_card,
    build_species_cards,
    render_species_card,
    render_species_grid,
)

__all__ = [
    # Species card
    "SpeciesCard",
    "build_species_card",
    "build_species_cards",
    "render_species_card",
    "render_species_grid",
]

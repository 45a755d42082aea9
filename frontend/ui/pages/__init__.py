"""Page components for the species listing."""
from frontend.ui.pages.species_listing import (
    SpeciesViewController,
    render_species_listing_page,
)

__all__ = [
    "SpeciesViewController",
    "render_species_listing_page",
]

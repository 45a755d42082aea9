"""
Unit tests for species card mapping.

Tests fallback defaults applied when building card records.
"""
from unittest.mock import patch

from frontend.config.settings import config
from frontend.services.swapi_client import Species
from frontend.ui.components.species_card import (
    SpeciesCard,
    build_species_card,
    build_species_cards,
    render_species_card,
)


class TestBuildSpeciesCard:
    """Tests for build_species_card."""

    def test_full_record(self, species_payloads):
        payload = next(iter(species_payloads.values()))
        card = build_species_card(Species.from_payload(payload))

        assert card == SpeciesCard(
            name="Yoda's species",
            classification="mammal",
            designation="sentient",
            height='26"',
            image=config.SPECIES_IMAGES['yoda'],
            num_films=5,
            language="Galactic basic",
        )

    def test_missing_fields_default_to_na(self):
        """Test that empty or missing text fields become n/a."""
        card = build_species_card(Species(name="", classification=None, language=""))

        assert card.name == "n/a"
        assert card.classification == "n/a"
        assert card.designation == "n/a"
        assert card.language == "n/a"
        assert card.height == "n/a"

    def test_unknown_height(self):
        assert build_species_card(Species(name="Droid", average_height="n/a")).height == "n/a"

    def test_num_films_defaults_to_zero(self):
        """Test that a missing film list counts as zero films."""
        assert build_species_card(Species(name="Human")).num_films == 0
        assert build_species_card(Species(name="Human", films=())).num_films == 0

    def test_image_lookup(self):
        """Test that only names in the lookup table get an image."""
        assert build_species_card(Species(name="Wookie")).image == config.SPECIES_IMAGES['wookie']
        assert build_species_card(Species(name="Ewok")).image is None

    def test_custom_image_map_and_decimals(self):
        card = build_species_card(
            Species(name="Ewok", average_height="100"),
            image_map={"Ewok": "https://img.test/ewok.png"},
            decimals=2,
        )

        assert card.image == "https://img.test/ewok.png"
        assert card.height == '39.37"'


class TestBuildSpeciesCards:
    """Tests for build_species_cards."""

    def test_none_is_empty(self):
        assert build_species_cards(None) == []

    def test_keeps_order(self, species_payloads):
        species = [Species.from_payload(p) for p in species_payloads.values()]

        cards = build_species_cards(species)

        assert [c.name for c in cards] == [s.name for s in species]
        assert [c.height for c in cards] == ['26"', '79"', '83"', 'n/a', '71"']


class TestRenderSpeciesCard:
    """Tests for card rendering with Streamlit mocked out."""

    def test_image_stretches_to_card(self):
        card = build_species_card(Species(name="Wookie"))

        with patch('frontend.ui.components.species_card.st') as mock_st:
            render_species_card(card)

        mock_st.image.assert_called_once_with(config.SPECIES_IMAGES['wookie'], width="stretch")

    def test_placeholder_without_image(self):
        card = build_species_card(Species(name="<b>Ewok</b>"))

        with patch('frontend.ui.components.species_card.st') as mock_st:
            render_species_card(card)

        mock_st.image.assert_not_called()
        rendered = " ".join(str(c.args[0]) for c in mock_st.markdown.call_args_list)
        assert "&lt;b&gt;Ewok&lt;/b&gt;" in rendered
        assert "<b>Ewok</b>" not in rendered

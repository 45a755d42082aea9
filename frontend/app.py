"""Species Listing Frontend Application.

Streamlit app listing the species of The Empire Strikes Back.
"""

import logging
import sys
from pathlib import Path

# Load environment variables from .env file BEFORE any other imports
# so the config dataclass sees the overrides
from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from frontend.config.settings import config
from frontend.utils import SessionState
from frontend.ui.pages import render_species_listing_page

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    # Page configuration - must be first Streamlit command
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon=config.APP_ICON,
        layout="wide",
    )

    SessionState.init_defaults()

    render_species_listing_page()


if __name__ == "__main__":
    main()

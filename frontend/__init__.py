"""Species Listing Frontend Package.

Streamlit frontend with:
- Frozen dataclass configuration
- Star Wars API client with concurrent species fetching
- Session state management
- Species card components
"""

__version__ = "1.0.0"

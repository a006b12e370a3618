"""
Models layer - view state for the Streamlit front end.
"""

from models.display_state import DisplayState

__all__ = ["DisplayState"]

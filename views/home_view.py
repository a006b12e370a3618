"""
Home View - the page showing the greeting from the API.
"""

from typing import Optional

import streamlit as st

from controllers.greeting_controller import GreetingController

PAGE_TITLE = "Home Page"
PAGE_DESCRIPTION = "Welcome to My Next.js App"


class HomeView:
    """View for the home page."""

    def __init__(self, controller: Optional[GreetingController] = None):
        self.controller = controller or GreetingController()

    def render(self) -> None:
        """Render the greeting, then mount the controller."""
        st.markdown(f"## {PAGE_DESCRIPTION}")
        st.markdown(f"The message from the API is: {self.controller.get_message()}")

        # Fetch only after the initial (empty) render went out
        if not self.controller.is_requested():
            self.controller.display.subscribe(self._on_message)
            self.controller.mount()

    def _on_message(self, _message: str) -> None:
        """Re-render once the greeting arrives."""
        st.rerun()

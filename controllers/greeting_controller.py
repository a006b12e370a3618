"""
Greeting Controller - manages the home page greeting and its state.

This controller handles:
- Session state initialization
- The one-time greeting request issued when the page first mounts
- Routing the response into the DisplayState
"""

import logging
from collections.abc import MutableMapping
from typing import Optional

import httpx
import streamlit as st

from models.display_state import DisplayState
from services.greeting_client import GreetingClient

logger = logging.getLogger(__name__)


class GreetingController:
    """Controller for the home page greeting."""

    def __init__(
        self,
        client: Optional[GreetingClient] = None,
        state: Optional[MutableMapping] = None
    ):
        self.client = client or GreetingClient()
        # st.session_state in the app, a plain dict in tests
        self._state = state if state is not None else st.session_state
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "greeting" not in self._state:
            self._state["greeting"] = {
                "display": DisplayState(),
                "requested": False,
            }

    # Session state accessors
    @property
    def display(self) -> DisplayState:
        return self._state["greeting"]["display"]

    def get_message(self) -> str:
        """Get the message currently on display."""
        return self.display.message

    def is_requested(self) -> bool:
        """Check if the greeting request was already issued."""
        return self._state["greeting"]["requested"]

    # Lifecycle
    def mount(self) -> None:
        """
        Fetch the greeting the first time the page mounts.

        Later calls (Streamlit reruns) do nothing, so the request is
        issued once per session. A failed request is logged and the
        display stays empty; it is not retried.
        """
        if self.is_requested():
            return
        self._state["greeting"]["requested"] = True

        # RuntimeError: asyncio.run called from a thread with a running loop
        try:
            message = self.client.fetch_message()
        except (httpx.HTTPError, ValueError, KeyError, TypeError, RuntimeError) as e:
            logger.error(f"Greeting request failed: {e}")
            return

        self.display.set_message(message)

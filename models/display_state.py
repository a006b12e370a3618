"""
Display State - the message shown by the home page.

Holds the single piece of mutable state of the view. The message starts
empty and can be set exactly once, through set_message(). Subscribers
are notified after that mutation so the view can re-render.
"""

from typing import Callable

Listener = Callable[[str], None]


class DisplayState:
    """Observable holder for the displayed greeting."""

    def __init__(self):
        self._message = ""
        self._updated = False
        self._listeners: list[Listener] = []

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_updated(self) -> bool:
        """True once set_message() has been called."""
        return self._updated

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked with the new message after an update."""
        self._listeners.append(listener)

    def set_message(self, message: str) -> None:
        """
        Store the message received from the API and notify subscribers.

        Listeners run in subscription order and exceptions are not caught.
        The view's listener calls st.rerun(), which raises to restart the
        script, so listeners subscribed after it never run. The message is
        stored before any listener is called.

        Raises:
            RuntimeError: if the message was already set
        """
        if self._updated:
            raise RuntimeError("Display state was already updated")

        self._message = message
        self._updated = True

        for listener in list(self._listeners):
            listener(message)

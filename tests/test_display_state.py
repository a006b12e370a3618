"""
Tests for the observable display state.
"""
import pytest

from models.display_state import DisplayState


def test_starts_empty():
    state = DisplayState()
    assert state.message == ''
    assert not state.is_updated


def test_set_message_notifies_once():
    state = DisplayState()
    received = []
    state.subscribe(received.append)

    state.set_message('Hello World')

    assert state.message == 'Hello World'
    assert state.is_updated
    assert received == ['Hello World']


def test_second_update_rejected():
    state = DisplayState()
    received = []
    state.subscribe(received.append)
    state.set_message('Hello World')

    with pytest.raises(RuntimeError):
        state.set_message('Again')

    assert state.message == 'Hello World'
    assert received == ['Hello World']


def test_listeners_run_in_order_and_errors_propagate():
    """A raising listener stops later ones, after the message is stored."""
    state = DisplayState()
    called = []

    def restart(message):
        called.append('restart')
        raise LookupError('restart script')

    state.subscribe(restart)
    state.subscribe(lambda message: called.append('late'))

    with pytest.raises(LookupError):
        state.set_message('Hello World')

    assert called == ['restart']
    assert state.message == 'Hello World'
    assert state.is_updated

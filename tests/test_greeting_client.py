"""
Tests for the greeting client, using httpx.MockTransport instead of a
running server.
"""
import httpx
import pytest

from services.greeting_client import GreetingClient

URL = 'http://testserver/api/hello'


def make_client(handler):
    return GreetingClient(url=URL, timeout=1.0, transport=httpx.MockTransport(handler))


def test_returns_message_unchanged():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={'message': 'Hello World'})

    assert make_client(handler).fetch_message() == 'Hello World'
    assert len(requests) == 1
    assert requests[0].method == 'GET'
    assert str(requests[0].url) == URL


def test_network_error_raises():
    def handler(request):
        raise httpx.ConnectError('connection refused', request=request)

    with pytest.raises(httpx.ConnectError):
        make_client(handler).fetch_message()


def test_error_status_raises():
    def handler(request):
        return httpx.Response(500, json={'message': 'Hello World'})

    with pytest.raises(httpx.HTTPStatusError):
        make_client(handler).fetch_message()


def test_non_json_body_raises():
    def handler(request):
        return httpx.Response(200, text='<html>oops</html>')

    with pytest.raises(ValueError):
        make_client(handler).fetch_message()


def test_missing_message_raises():
    def handler(request):
        return httpx.Response(200, json={'greeting': 'Hello World'})

    with pytest.raises(KeyError):
        make_client(handler).fetch_message()


def test_url_defaults_to_settings(monkeypatch):
    monkeypatch.setenv('API_BASE_URL', 'http://api.example:4000')
    client = GreetingClient()
    assert client.url == 'http://api.example:4000/api/hello'

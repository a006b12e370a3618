"""
Shared fixtures for the Hello World tests.
"""
import random

import pytest
from fastapi.testclient import TestClient

from app.main import app
from config.settings import get_settings


@pytest.fixture
def client():
    """Create a test client for the API."""
    return TestClient(app)


@pytest.fixture
def rng():
    """Seeded random source for repeatable generator output."""
    return random.Random(1234)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

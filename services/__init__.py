"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.greeting_client import GreetingClient

__all__ = ["GreetingClient"]

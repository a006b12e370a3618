"""
Models Package - API Schemas

This package contains the Pydantic models returned by the Hello World API.
"""

from app.models.schemas import GreetingResponse, RandomTextResponse

__all__ = [
    "GreetingResponse",
    "RandomTextResponse",
]

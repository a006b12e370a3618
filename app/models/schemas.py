"""
Pydantic Schemas (Data Transfer Objects)

These schemas define the structure of data returned by the API.
They give the endpoints a typed response contract and feed the
OpenAPI documentation served at /api-docs.

Naming Convention:
- *Response: Data returned to clients
"""

from pydantic import BaseModel, Field


# ============================================
# Greeting Schemas
# ============================================

class GreetingResponse(BaseModel):
    """
    Payload of the greeting endpoint.

    Built fresh for every request and never modified afterwards.
    """
    message: str = Field(..., description="Greeting text shown by the home page")

    class Config:
        frozen = True


# ============================================
# Random Text Schemas
# ============================================

class RandomTextResponse(BaseModel):
    """Random Japanese text produced by the text generator."""
    text: str = Field(..., description="Generated characters")
    length: int = Field(..., ge=1, le=30, description="Number of characters in text")

    class Config:
        frozen = True

"""
Hello World API - Application Entry Point

This is the FastAPI application behind the Hello World demo page.
It follows the same MVC split as the Streamlit front end.

Architecture Overview:
=====================
- Models (app/models/): Pydantic schemas for API responses
- Controllers (app/controllers/): Request handlers
  - greeting.py: the fixed greeting fetched by the home page
  - random_text.py: random Japanese text from the text generator
- Services (app/services/): Business logic with no FastAPI dependency
  - random_text.py: hiragana / katakana / kanji string generator

Request Flow:
============
1. The home page (streamlit_app.py) mounts and requests /api/hello
2. The greeting controller answers with a GreetingResponse
3. The page shows the returned message

Interactive API documentation is served at /api-docs.
"""

import logging

from fastapi import FastAPI

# Import controllers (the 'C' in MVC)
from app.controllers import greeting_router, random_text_router

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Hello World API",
    description="""
    Backend for the Hello World demo page.

    ## Endpoints
    - `/api/hello`: fixed greeting, any HTTP method
    - `/api/random-text`: random hiragana, katakana and kanji
    """,
    version="1.0.0",
    docs_url="/api-docs",
    redoc_url="/redoc"
)

# Register controllers (routers)
app.include_router(greeting_router)      # /api/hello
app.include_router(random_text_router)   # /api/random-text


@app.get("/health", tags=["health"])
def health_check():
    """
    Basic health check endpoint.

    Returns a simple status indicating the API is running.
    """
    return {
        "status": "healthy",
        "service": "Hello World API",
        "version": app.version
    }

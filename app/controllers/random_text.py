"""
Random Text Controller

Exposes the random Japanese text generator over HTTP.

The generator itself lives in app/services/random_text.py and has no
FastAPI dependency; this controller only decides which random source
to hand it. Passing ?seed=<int> makes the output repeatable, which is
handy when demoing or writing client tests.
"""

import random

from fastapi import APIRouter

from app.models import RandomTextResponse
from app.services.random_text import generate_string

router = APIRouter(prefix="/api", tags=["random-text"])


@router.get("/random-text", response_model=RandomTextResponse)
def random_text(seed: int | None = None):
    """Generate 1-30 random hiragana, katakana and kanji characters."""
    rng = random.Random(seed) if seed is not None else random.Random()
    text = generate_string(rng)
    return RandomTextResponse(text=text, length=len(text))

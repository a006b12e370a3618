"""
Greeting Controller

Serves the fixed greeting consumed by the home page.

The handler ignores everything about the incoming request (method,
query string, body) and always answers 200 with the same payload.
GET is registered as a regular API route so the payload shows up in
the OpenAPI docs; a plain route with no method filter catches every
other method, including TRACE and non-standard ones.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.models import GreetingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["greeting"])

GREETING_MESSAGE = "Hello World"


@router.get("/hello", response_model=GreetingResponse)
def hello(request: Request) -> GreetingResponse:
    """Return the greeting shown on the home page."""
    logger.debug(f"Greeting requested: {request.method} {request.url.path}")
    return GreetingResponse(message=GREETING_MESSAGE)


def hello_any_method(request: Request) -> JSONResponse:
    """Same greeting for every method the GET route does not match."""
    return JSONResponse(hello(request).model_dump())


# Plain routes don't get the router prefix; no methods means any method
router.add_route(
    f"{router.prefix}/hello",
    hello_any_method,
    include_in_schema=False
)

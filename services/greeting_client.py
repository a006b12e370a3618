"""
Greeting Client - fetches the greeting from the Hello World API.

This service is pure Python with no Streamlit dependencies.
Uses httpx for the HTTP request.
"""

import asyncio
import logging
from typing import Optional

import httpx

from config.settings import get_settings

logger = logging.getLogger(__name__)


class GreetingClient:
    """Client for the /api/hello endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        settings = get_settings()
        self.url = url or settings.greeting_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def _fetch_message_async(self) -> str:
        """
        Async implementation of the greeting request.

        Raises:
            httpx.HTTPError: on transport errors or a non-2xx status
            ValueError: if the body is not JSON
            KeyError: if the body has no "message" field
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport
        ) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            data = response.json()

        logger.debug(f"data: {data}")
        return data["message"]

    def fetch_message(self) -> str:
        """
        Request the greeting and return its message field unchanged.

        Errors are not handled here; see _fetch_message_async for what
        can be raised.
        """
        # Run async function in sync context
        return asyncio.run(self._fetch_message_async())

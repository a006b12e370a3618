"""
Standalone runner for the Hello World API.

Usage:
    python -m app.run
    hello-api

Environment variables:
    PORT: Port to bind to (default: 3000)
    HOST: Interface to bind to (default: 0.0.0.0)
    APP_ENV: "production" disables auto-reload (default: development)
    LOG_LEVEL: Root log level (default: INFO)
"""

import logging

import uvicorn

from config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the API server."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    mode = "production" if settings.is_production else "development"
    logger.info(f"Starting Hello World API in {mode} mode...")
    logger.info(f"Binding to {settings.host}:{settings.port}")

    # A bind failure makes uvicorn exit the process; there is no retry
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Entry point for the Space Fleet API.

Launches the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); everything else is configured through the
variables documented in ``space_fleet_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from space_fleet_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_api())


if __name__ == "__main__":
    main()

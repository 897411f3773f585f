"""Entry point for serving the Health Records API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); see ``health_records_api/app/core/config.py``
for the full list of settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from health_records_api.app.core.config import settings
from health_records_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info(
        "Starting %s %s on %s:%s", settings.project_name, settings.api_version, settings.api_host, settings.api_port
    )
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

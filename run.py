"""Entry point for the Customer Manager API.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example in Docker, where you only
specify a single Python file to run.

Host and port are read from ``API_HOST`` and ``API_PORT``; the database
location from ``DATABASE_URL``.  See ``customer_manager_api/app/core/config.py``
for all supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from customer_manager_api.app.core.config import settings
from customer_manager_api.app.main import app


async def main() -> None:
    """Start the API server and run until it is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

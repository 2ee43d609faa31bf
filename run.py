"""Entry point that serves the Exercise Tracker API with uvicorn.

Host, port, log level and the data file are read from environment
variables (``HOST``, ``PORT``, ``LOG_LEVEL``, ``DATA_FILE``); see
``exercise_tracker_api/app/core/config.py`` for the defaults.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Your app is listening on port %d", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

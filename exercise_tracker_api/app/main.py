"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: it sets up logging,
CORS, static assets, the landing page, error handlers and the API
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with uvicorn, e.g.::

    uvicorn exercise_tracker_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import JsonStore

APP_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = APP_DIR / "public"
VIEWS_DIR = APP_DIR / "views"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``, for
        example to point the store at another data file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Logging first so everything below can log.
    setup_logging(app_settings)

    store = JsonStore(app_settings.resolve_data_file())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store.init()
        yield

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(VIEWS_DIR / "index.html")

    app.include_router(api_router, prefix="/api")

    return app


# Created at import time so uvicorn can discover it without calling
# create_app manually.
app = create_app()

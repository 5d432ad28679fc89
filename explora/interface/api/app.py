"""Explora HTTP API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from explora.config import Settings
from explora.interface.api.routes import admin, health, locations, taxonomy, users
from explora.interface.error import register_error_handlers
from explora.util.di.container import create_container, setup_di
from explora.util.observability import instrument_fastapi

ROUTERS = (health, taxonomy, locations, admin, users)

# Local frontend dev server
DEV_ORIGIN = "http://localhost:5173"


def create_app() -> FastAPI:
    """Assemble the API around a production container.

    Call ``configure_logfire`` first; ``scripts/start_app.py`` does so
    before uvicorn imports this module.
    """
    settings = Settings()

    app = FastAPI(
        title="Explora API",
        description="Location tagging, quality control and personalized discovery for Vienna",
        version="0.1.0",
    )
    instrument_fastapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, DEV_ORIGIN],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )
    register_error_handlers(app)
    setup_di(app, create_container())

    for module in ROUTERS:
        app.include_router(module.router)

    return app


app = create_app()

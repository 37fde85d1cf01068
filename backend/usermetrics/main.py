from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usermetrics.api.router import api_router
from usermetrics.core.config import Settings, settings as default_settings
from usermetrics.core.errors import register_exception_handlers
from usermetrics.db.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the API around an explicit persistence handle.
    - `database` defaults to one built from settings.database_url and disposed on shutdown;
      an injected handle stays open for whoever created it.
    - Tables are created on startup only when create_tables_on_startup is set (local sqlite runs);
      otherwise the schema comes from alembic.
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    owns_db = database is None
    db = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.create_tables_on_startup:
            db.create_all()
            logger.info("Database tables created/verified")
        yield
        if owns_db:
            db.dispose()
            logger.info("Database connections released")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.db = db
    app.state.settings = settings

    origins = settings.cors_origins or ["http://localhost:3000"]
    logger.info("CORS allow_origins=%s", origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(api_router)
    return app


app = create_app()

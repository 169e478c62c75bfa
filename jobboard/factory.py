# jobboard/factory.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from jobboard.api import auth, jobs, applications, uploads
from jobboard.core.config import Settings, settings as default_settings
from jobboard.core.errors import install_exception_handlers
from jobboard.db.database import build_engine, build_session_factory
from jobboard.db.models import Base
from jobboard.storage.resumes import ensure_upload_dir, PUBLIC_PREFIX

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the API around one Settings object.
    The engine and session factory are created on startup and disposed on
    shutdown; handlers reach them through app.state.
    """
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings.DATABASE_URL)
        Base.metadata.create_all(bind=engine)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info(f"Database ready ({engine.url.render_as_string(hide_password=True)}).")
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database engine disposed.")

    app = FastAPI(
        title="Job Board API",
        description="Job listings, applications with resume upload, and an admin panel",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    # All endpoints live under /api
    app.include_router(auth.router, prefix="/api")
    app.include_router(uploads.router, prefix="/api")
    app.include_router(jobs.public_router, prefix="/api")
    app.include_router(jobs.admin_router, prefix="/api")
    app.include_router(applications.public_router, prefix="/api")
    app.include_router(applications.admin_router, prefix="/api")

    # Uploaded resumes are plain static files, no access control
    app.mount(
        PUBLIC_PREFIX,
        StaticFiles(directory=ensure_upload_dir(settings.UPLOAD_DIR)),
        name="uploads",
    )

    @app.get("/", include_in_schema=False)
    async def read_root():
        return RedirectResponse(url="/docs")

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

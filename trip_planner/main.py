"""
FastAPI entrypoint for the Trip Planner backend application.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trip_planner.api.router import api_router
from trip_planner.core.config import Settings, get_settings
from trip_planner.core.errors import register_exception_handlers
from trip_planner.core.logging import setup_logging
from trip_planner.db.session import Store

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Application factory.

    ``settings`` and ``store`` may be passed in by tests; otherwise settings come
    from the environment and the store is built from ``DATABASE_URL``. The
    store is opened on startup and closed on shutdown.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    store = store or Store(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open(create_all=settings.DB_CREATE_ALL)
        app.state.store = store
        logger.info(f"{settings.APP_NAME} started")
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Backend API for planning trips and tracking their expenses",
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/rpc")

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"message": f"{settings.APP_NAME} API is running"}

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "trip_planner.main:create_app",
        factory=True,
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
    )

"""FastAPI application factory.

Usage:
    # Development
    uv run fastapi dev src/swimbarriers/api/app.py

    # Production
    uv run fastapi run src/swimbarriers/api/app.py
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from swimbarriers import configure_logging, get_logger
from swimbarriers.api.routes import (
    barriers_router,
    health_router,
    races_router,
    reference_router,
    swimmers_router,
)
from swimbarriers.config import get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "app_starting",
        environment=settings.environment.value,
        supabase_url=settings.supabase_url,
    )
    yield
    logger.info("app_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Swim Barriers API",
        description="Race records, barrier evaluation and progression for swim clubs",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    app.include_router(health_router)
    app.include_router(swimmers_router, prefix="/api/v1")
    app.include_router(races_router, prefix="/api/v1")
    app.include_router(barriers_router, prefix="/api/v1")
    app.include_router(reference_router, prefix="/api/v1")

    return app


# Application instance for uvicorn
app = create_app()

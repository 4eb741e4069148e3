"""India App API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly: health first, then one router per resource
    - Global error handlers map IndiaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging and the database engine initialized once on startup via lifespan
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, resources
from app.config import get_settings
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"{settings.app_name} started")
    yield
    await close_db()
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(title="India App API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
for router in resources.routers:
    app.include_router(router)


def run() -> None:
    """Console entry point: serve the app on the configured port."""
    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    run()

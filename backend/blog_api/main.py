"""Blog API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BlogApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database manager opened on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: one place for startup and cleanup
    - run() is the server entry point; tests drive the ASGI app directly
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import posts
from blog_api.config import get_settings
from blog_api.infrastructure.database import close_db, init_db
from blog_api.infrastructure.observability import setup_logging

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
    logger.info("Blog API started")
    yield
    await close_db()
    logger.info("Blog API shut down")


app = FastAPI(title="Blog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(posts.router)

register_error_handlers(app)


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    uvicorn.run(
        "blog_api.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    run()

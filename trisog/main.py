"""Trisog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TrisogError → {"msg": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - OpenAPI document generated by FastAPI at /openapi.json, UI at /docs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trisog import __version__
from trisog.api.error_handlers import register_error_handlers
from trisog.api.routes import (
    bookings, categories, destinations, experiences, favorites, health,
    newsletters, plans, reviews, testimonials,
)
from trisog.config import get_settings
from trisog.infrastructure.database import close_db, init_db
from trisog.infrastructure.observability import setup_logging

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
    logger.info("Trisog API started")
    yield
    await close_db()
    logger.info("Trisog API shutting down")


app = FastAPI(
    title="Trisog API", version=__version__, lifespan=lifespan,
)

# CORS from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router)
app.include_router(destinations.router)
app.include_router(experiences.router)
app.include_router(categories.router)
app.include_router(plans.router)
app.include_router(bookings.router)
app.include_router(reviews.router)
app.include_router(favorites.router)
app.include_router(testimonials.router)
app.include_router(newsletters.router)

register_error_handlers(app)

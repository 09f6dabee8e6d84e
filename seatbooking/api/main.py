"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
wires the storage backend and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from seatbooking.adapters.repository.memory import (
    InMemoryParticipationRepository,
    InMemoryUserRepository,
    InMemoryWebinarRepository,
)
from seatbooking.adapters.repository.postgres import (
    PostgresParticipationRepository,
    PostgresUserRepository,
    PostgresWebinarRepository,
    run_migrations,
)
from seatbooking.adapters.repository.seed import load_seed
from seatbooking.adapters.smtp.console import ConsoleMailer
from seatbooking.api.v1 import router as v1_router
from seatbooking.config.settings import Settings, get_settings
from seatbooking.domain.booking import BookSeatService

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Webinar Seat Booking API v1 - Register users for webinars",
    },
]


def build_memory_service(settings: Settings) -> BookSeatService:
    """Wire the booking service on in-memory repositories, seeded from settings.seed_file."""
    users = InMemoryUserRepository()
    webinars = InMemoryWebinarRepository()
    if settings.seed_file is not None:
        load_seed(settings.seed_file, users, webinars)
    else:
        logger.warning("Memory backend started without SEED_FILE; no users or webinars exist")

    return BookSeatService(
        participations=InMemoryParticipationRepository(),
        users=users,
        webinars=webinars,
        mailer=ConsoleMailer(),
        enforce_seat_availability=settings.enforce_seat_availability,
    )


def build_postgres_service(settings: Settings, pool: ConnectionPool) -> BookSeatService:
    """Wire the booking service on PostgreSQL repositories."""
    return BookSeatService(
        participations=PostgresParticipationRepository(pool),
        users=PostgresUserRepository(pool),
        webinars=PostgresWebinarRepository(pool),
        mailer=ConsoleMailer(),
        enforce_seat_availability=settings.enforce_seat_availability,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and runs migrations (postgres backend)
    - Builds the shared booking service
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    logger.info("Starting application (storage backend: %s)...", settings.storage_backend)

    pool = None
    if settings.storage_backend == "memory":
        app.state.book_seat_service = build_memory_service(settings)
    else:
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.book_seat_service = build_postgres_service(settings, pool)

    app.state.pool = pool
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="seatbooking",
    description="Webinar Seat Booking API - Books seats and notifies webinar organizers",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application (and database, when configured) are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}

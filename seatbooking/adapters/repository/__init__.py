"""Repository adapters - In-memory and database implementations."""

from .memory import (
    InMemoryParticipationRepository,
    InMemoryUserRepository,
    InMemoryWebinarRepository,
)
from .postgres import (
    PostgresParticipationRepository,
    PostgresUserRepository,
    PostgresWebinarRepository,
    run_migrations,
)
from .seed import load_seed

__all__ = [
    "InMemoryParticipationRepository",
    "InMemoryUserRepository",
    "InMemoryWebinarRepository",
    "PostgresParticipationRepository",
    "PostgresUserRepository",
    "PostgresWebinarRepository",
    "load_seed",
    "run_migrations",
]

"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repositories and a mock mailer
- A booking service wired on them with a frozen clock
"""

from unittest.mock import Mock

import pytest
from factories import NOW

from seatbooking.adapters.repository.memory import (
    InMemoryParticipationRepository,
    InMemoryUserRepository,
    InMemoryWebinarRepository,
)
from seatbooking.domain.booking import BookSeatService
from seatbooking.domain.entities import User


@pytest.fixture
def webinars() -> InMemoryWebinarRepository:
    return InMemoryWebinarRepository()


@pytest.fixture
def participations() -> InMemoryParticipationRepository:
    return InMemoryParticipationRepository()


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def mailer() -> Mock:
    return Mock()


@pytest.fixture
def organizer(users: InMemoryUserRepository) -> User:
    organizer = User(id="organizer1", email="organizer@example.com")
    users.add(organizer)
    return organizer


@pytest.fixture
def user() -> User:
    return User(id="user1", email="user@example.com")


@pytest.fixture
def service(
    participations: InMemoryParticipationRepository,
    users: InMemoryUserRepository,
    webinars: InMemoryWebinarRepository,
    mailer: Mock,
) -> BookSeatService:
    return BookSeatService(
        participations=participations,
        users=users,
        webinars=webinars,
        mailer=mailer,
        clock=lambda: NOW,
    )

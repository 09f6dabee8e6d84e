"""
FastAPI dependencies - Dependency injection factories.

The booking service holds the per-webinar locks, so one instance is
built at startup (see main.lifespan) and shared by every request.
"""

from fastapi import Request

from seatbooking.domain.booking import BookSeatService
from seatbooking.domain.ports import ParticipationRepository, UserRepository


def get_book_seat_service(request: Request) -> BookSeatService:
    """Get the shared booking service from app state."""
    return request.app.state.book_seat_service


def get_user_repository(request: Request) -> UserRepository:
    """Get the user repository the booking service was wired with."""
    return request.app.state.book_seat_service.users


def get_participation_repository(request: Request) -> ParticipationRepository:
    """Get the participation repository the booking service was wired with."""
    return request.app.state.book_seat_service.participations

"""
Domain layer - Pure business logic with zero framework imports.

This package contains the webinar seat booking workflow, the entities it
operates on and the port interfaces it consumes, ensuring the workflow
stays decoupled from storage and mail delivery.
"""

from .booking import BookingResult, BookSeatService, WebinarLocks
from .entities import Participation, User, Webinar
from .exceptions import (
    AlreadyRegistered,
    BookingError,
    CapacityTooHigh,
    CapacityTooLow,
    NoSeatsLeft,
    OrganizerContactMissing,
    WebinarNotFound,
    WebinarTooSoon,
)
from .ports import Mailer, ParticipationRepository, UserRepository, WebinarRepository

__all__ = [
    "AlreadyRegistered",
    "BookSeatService",
    "BookingError",
    "BookingResult",
    "CapacityTooHigh",
    "CapacityTooLow",
    "Mailer",
    "NoSeatsLeft",
    "OrganizerContactMissing",
    "Participation",
    "ParticipationRepository",
    "User",
    "UserRepository",
    "Webinar",
    "WebinarLocks",
    "WebinarNotFound",
    "WebinarRepository",
    "WebinarTooSoon",
]

"""
Book-seat domain service - registers a user for a webinar.

Booking Flow
============

Validation order is observable and fixed:

    1. load existing participations for the webinar
    2. load the webinar (WebinarNotFound propagates from the repository)
    3. AlreadyRegistered     - user already holds a seat
    4. WebinarTooSoon        - starts in under 3 days
    5. CapacityTooHigh       - more than 1000 seats configured
    6. CapacityTooLow        - fewer than 1 seat configured
    7. save the participation
    8. look up the organizer
    9. OrganizerContactMissing - organizer unknown or without email
   10. email the organizer
   11. return BookingResult

Steps 1-7 run under a per-webinar lock, so the duplicate check and the
save are atomic for callers sharing one WebinarLocks instance.

Write-then-notify: the participation is committed at step 7 and is never
rolled back. A failure at step 9 or 10 still leaves the seat booked.

Seat availability (booked count vs capacity) is not checked unless
enforce_seat_availability is set; only the configured capacity bounds
are validated by default.
"""

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime

from .entities import Participation, User, Webinar
from .exceptions import (
    AlreadyRegistered,
    CapacityTooHigh,
    CapacityTooLow,
    NoSeatsLeft,
    OrganizerContactMissing,
    WebinarTooSoon,
)
from .ports import Mailer, ParticipationRepository, UserRepository, WebinarRepository

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "User registered successfully"
NOTIFICATION_SUBJECT = "New participant"


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class BookingResult:
    """Outcome of a successful booking."""

    success: bool
    message: str


class WebinarLocks:
    """
    Hands out one lock per webinar id.

    Entries are reference counted and dropped once the last holder (or
    waiter) leaves, so ids that never resolve to a webinar leave nothing
    behind.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, list] = {}  # webinar_id -> [lock, holders]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, webinar_id: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(webinar_id, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[webinar_id]


@dataclass
class BookSeatService:
    """
    Domain service for webinar seat booking.

    Orchestrates the validations, the participation write and the
    organizer notification.
    """

    participations: ParticipationRepository
    users: UserRepository
    webinars: WebinarRepository
    mailer: Mailer
    clock: Callable[[], datetime] = utc_now
    locks: WebinarLocks = field(default_factory=WebinarLocks)
    enforce_seat_availability: bool = False

    def execute(self, webinar_id: str, user: User) -> BookingResult:
        """
        Book a seat on a webinar for a user.

        Args:
            webinar_id: Id of the webinar to join
            user: The requesting user

        Returns:
            BookingResult(success=True, message="User registered successfully")

        Raises:
            WebinarNotFound: If the webinar does not exist
            AlreadyRegistered: If the user already has a seat
            WebinarTooSoon: If the webinar starts in under 3 days
            CapacityTooHigh: If the webinar has more than 1000 seats
            CapacityTooLow: If the webinar has fewer than 1 seat
            NoSeatsLeft: If availability is enforced and every seat is taken
            OrganizerContactMissing: If the organizer cannot be emailed
                (the participation is already saved at that point)
        """
        with self.locks.hold(webinar_id):
            existing = self.participations.find_by_webinar_id(webinar_id)
            webinar = self.webinars.find_by_id(webinar_id)

            self._check_can_book(webinar, user, existing)

            self.participations.save(Participation(user_id=user.id, webinar_id=webinar_id))

        logger.info("Participation saved: user=%s webinar=%s", user.id, webinar_id)
        self._notify_organizer(webinar, user)
        return BookingResult(success=True, message=SUCCESS_MESSAGE)

    def _check_can_book(
        self, webinar: Webinar, user: User, existing: list[Participation]
    ) -> None:
        if any(p.user_id == user.id for p in existing):
            logger.info("Rejected: user=%s already registered for %s", user.id, webinar.id)
            raise AlreadyRegistered(user.id, webinar.id)

        if webinar.is_too_soon(self.clock()):
            logger.info("Rejected: webinar %s starts too soon", webinar.id)
            raise WebinarTooSoon(webinar.id)

        if webinar.has_too_many_seats():
            logger.info("Rejected: webinar %s has %d seats", webinar.id, webinar.seats)
            raise CapacityTooHigh(webinar.id)

        if webinar.has_not_enough_seats():
            logger.info("Rejected: webinar %s has %d seats", webinar.id, webinar.seats)
            raise CapacityTooLow(webinar.id)

        if self.enforce_seat_availability and webinar.is_full(len(existing)):
            logger.info("Rejected: webinar %s is full", webinar.id)
            raise NoSeatsLeft(webinar.id)

    def _notify_organizer(self, webinar: Webinar, user: User) -> None:
        organizer = self.users.find_by_id(webinar.organizer_id)
        if organizer is None or not organizer.has_email:
            logger.warning(
                "Organizer %s of webinar %s has no email, participation kept",
                webinar.organizer_id,
                webinar.id,
            )
            raise OrganizerContactMissing(webinar.organizer_id)

        # Registrants without an email are named by their id.
        contact = user.email if user.has_email else user.id
        try:
            self.mailer.send(
                to=organizer.email,
                subject=NOTIFICATION_SUBJECT,
                body=f"New participant for webinar {webinar.title}: {contact}",
            )
        except Exception:
            logger.exception("Notification to organizer of %s failed, participation kept", webinar.id)
            raise

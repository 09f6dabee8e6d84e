"""
Domain entities - Webinar, Participation and User.

Plain frozen dataclasses. Webinar carries the booking-time policy
predicates; they are evaluated on every booking attempt rather than at
construction time, since the clock moves and capacities are edited
outside this package.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

MIN_LEAD_TIME = timedelta(days=3)
MAX_SEATS = 1000
MIN_SEATS = 1


@dataclass(frozen=True)
class User:
    """A user as seen by the booking workflow (read-only)."""

    id: str
    email: str | None = None

    @property
    def has_email(self) -> bool:
        return bool(self.email and self.email.strip())


@dataclass(frozen=True)
class Webinar:
    """
    A scheduled webinar with an organizer and a seat capacity.

    Construction only checks structural well-formedness (non-empty title,
    timezone-aware dates, start before end). Seat bounds are booking policy, see
    has_too_many_seats() and has_not_enough_seats().
    """

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Webinar title must not be empty")
        if self.start_date.tzinfo is None or self.end_date.tzinfo is None:
            raise ValueError("Webinar dates must be timezone-aware")
        if self.start_date >= self.end_date:
            raise ValueError("Webinar must start before it ends")

    def is_too_soon(self, now: datetime) -> bool:
        """True when fewer than 3 days separate now from the start (3 days exactly is fine)."""
        return self.start_date - now < MIN_LEAD_TIME

    def has_too_many_seats(self) -> bool:
        return self.seats > MAX_SEATS

    def has_not_enough_seats(self) -> bool:
        return self.seats < MIN_SEATS

    def is_full(self, booked: int) -> bool:
        """True when `booked` participations already fill every seat."""
        return booked >= self.seats


@dataclass(frozen=True)
class Participation:
    """Link between a user and a webinar. Identity is the (user_id, webinar_id) pair."""

    user_id: str
    webinar_id: str

    def __post_init__(self) -> None:
        if not self.user_id or not self.webinar_id:
            raise ValueError("Participation requires both user_id and webinar_id")

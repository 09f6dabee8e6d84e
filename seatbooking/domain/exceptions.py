"""
Domain exceptions - Semantic error types for seat booking.

Each exception names one business rule or data-integrity violation.
They are raised synchronously to the caller and never retried; mapping
them to a transport (HTTP status, exit code) is the caller's job.
"""


class BookingError(Exception):
    """Base class for seat booking domain errors."""

    default_message = "Booking failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class WebinarNotFound(BookingError):
    """Webinar id does not resolve via the webinar repository."""

    default_message = "Webinar not found"

    def __init__(self, webinar_id: str) -> None:
        super().__init__()
        self.webinar_id = webinar_id


class AlreadyRegistered(BookingError):
    """User already holds a participation for the webinar."""

    default_message = "User is already registered"

    def __init__(self, user_id: str, webinar_id: str) -> None:
        super().__init__()
        self.user_id = user_id
        self.webinar_id = webinar_id


class WebinarTooSoon(BookingError):
    """Webinar starts in less than the minimum lead time."""

    default_message = "Webinar starts too soon"

    def __init__(self, webinar_id: str) -> None:
        super().__init__()
        self.webinar_id = webinar_id


class CapacityTooHigh(BookingError):
    """Webinar is configured with more seats than allowed."""

    default_message = "Webinar has too many seats"

    def __init__(self, webinar_id: str) -> None:
        super().__init__()
        self.webinar_id = webinar_id


class CapacityTooLow(BookingError):
    """Webinar is configured with fewer seats than allowed."""

    default_message = "Webinar has not enough seats"

    def __init__(self, webinar_id: str) -> None:
        super().__init__()
        self.webinar_id = webinar_id


class NoSeatsLeft(BookingError):
    """Every seat is taken (only raised when availability is enforced)."""

    default_message = "Webinar is full"

    def __init__(self, webinar_id: str) -> None:
        super().__init__()
        self.webinar_id = webinar_id


class OrganizerContactMissing(BookingError):
    """Organizer is unknown or has no email; raised after the seat is saved."""

    default_message = "Email not found"

    def __init__(self, organizer_id: str) -> None:
        super().__init__()
        self.organizer_id = organizer_id

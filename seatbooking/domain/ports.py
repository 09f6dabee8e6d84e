"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the booking workflow
requires from infrastructure. Adapters implement these protocols.

Note the lookup asymmetry: WebinarRepository.find_by_id raises
WebinarNotFound on absence, while UserRepository.find_by_id returns None.
"""

from typing import Protocol

from .entities import Participation, User, Webinar


class WebinarRepository(Protocol):
    """Port interface for webinar lookup."""

    def find_by_id(self, webinar_id: str) -> Webinar:
        """
        Load a webinar by id.

        Raises:
            WebinarNotFound: If no webinar has this id
        """
        ...


class ParticipationRepository(Protocol):
    """Port interface for participation persistence."""

    def find_by_webinar_id(self, webinar_id: str) -> list[Participation]:
        """Return every participation recorded for the webinar (order unspecified)."""
        ...

    def save(self, participation: Participation) -> None:
        """
        Persist a new participation.

        Implementations with a uniqueness guarantee may raise
        AlreadyRegistered when the (user_id, webinar_id) pair exists.
        """
        ...


class UserRepository(Protocol):
    """Port interface for user lookup."""

    def find_by_id(self, user_id: str) -> User | None:
        """Return the user, or None if unknown."""
        ...


class Mailer(Protocol):
    """Port interface for email delivery."""

    def send(self, to: str, subject: str, body: str) -> None:
        """
        Hand a message over for delivery.

        Raises if delivery cannot be attempted. Returning means the
        message was accepted for sending, not that it was delivered.
        """
        ...

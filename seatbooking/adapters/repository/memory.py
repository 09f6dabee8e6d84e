"""
In-memory repository adapters - Implement the domain's repository ports.

Backed by plain lists and dicts guarded by a lock. Used for the `memory`
storage backend and throughout the test suite.
"""

import threading

from seatbooking.domain.entities import Participation, User, Webinar
from seatbooking.domain.exceptions import WebinarNotFound


class InMemoryWebinarRepository:
    """
    Implements WebinarRepository protocol over a list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, database: list[Webinar] | None = None) -> None:
        self.database = list(database or [])
        self._lock = threading.Lock()

    def find_by_id(self, webinar_id: str) -> Webinar:
        with self._lock:
            for webinar in self.database:
                if webinar.id == webinar_id:
                    return webinar
        raise WebinarNotFound(webinar_id)

    def create(self, webinar: Webinar) -> None:
        with self._lock:
            self.database.append(webinar)


class InMemoryParticipationRepository:
    """Implements ParticipationRepository protocol over a list."""

    def __init__(self, database: list[Participation] | None = None) -> None:
        self.database = list(database or [])
        self._lock = threading.Lock()

    def find_by_webinar_id(self, webinar_id: str) -> list[Participation]:
        with self._lock:
            return [p for p in self.database if p.webinar_id == webinar_id]

    def save(self, participation: Participation) -> None:
        # No uniqueness check here; duplicates are rejected by the workflow.
        with self._lock:
            self.database.append(participation)


class InMemoryUserRepository:
    """Implements UserRepository protocol over a dict keyed by user id."""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users = {user.id: user for user in users or []}
        self._lock = threading.Lock()

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def add(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = user

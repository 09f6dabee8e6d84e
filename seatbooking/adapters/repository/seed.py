"""
Seed loader - Fills the in-memory repositories from a JSON file.

Users and webinars are owned by systems outside this service, so the
`memory` backend reads them from a file at startup:

    {
      "users": [{"id": "u1", "email": "u1@example.com"}],
      "webinars": [{"id": "w1", "organizer_id": "u1", "title": "Intro",
                    "start_date": "2030-01-01T10:00:00Z",
                    "end_date": "2030-01-01T11:00:00Z", "seats": 50}]
    }
"""

import logging
from pathlib import Path

from pydantic import AwareDatetime, BaseModel

from seatbooking.domain.entities import User, Webinar

from .memory import InMemoryUserRepository, InMemoryWebinarRepository

logger = logging.getLogger(__name__)


class SeedUser(BaseModel):
    id: str
    email: str | None = None


class SeedWebinar(BaseModel):
    id: str
    organizer_id: str
    title: str
    start_date: AwareDatetime
    end_date: AwareDatetime
    seats: int


class SeedData(BaseModel):
    """Top-level seed document."""

    users: list[SeedUser] = []
    webinars: list[SeedWebinar] = []


def load_seed(
    path: Path, users: InMemoryUserRepository, webinars: InMemoryWebinarRepository
) -> SeedData:
    """
    Parse the seed file and add its users and webinars to the repositories.

    Raises:
        OSError: If the file cannot be read
        pydantic.ValidationError: If the document is malformed
        ValueError: If a webinar breaks its construction rules
    """
    data = SeedData.model_validate_json(path.read_text())

    for seed_user in data.users:
        users.add(User(id=seed_user.id, email=seed_user.email))
    for seed_webinar in data.webinars:
        webinars.create(Webinar(**seed_webinar.model_dump()))

    logger.info(
        "Seeded %d user(s) and %d webinar(s) from %s",
        len(data.users),
        len(data.webinars),
        path,
    )
    return data

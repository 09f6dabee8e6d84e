"""
Unit tests for domain ports and exceptions.

Tests verify:
- Port interfaces are properly defined
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

from pathlib import Path

import pytest

from seatbooking.domain.entities import Participation, User, Webinar
from seatbooking.domain.exceptions import (
    AlreadyRegistered,
    BookingError,
    CapacityTooHigh,
    CapacityTooLow,
    NoSeatsLeft,
    OrganizerContactMissing,
    WebinarNotFound,
    WebinarTooSoon,
)
from seatbooking.domain.ports import (
    Mailer,
    ParticipationRepository,
    UserRepository,
    WebinarRepository,
)

DOMAIN_DIR = Path(__file__).resolve().parents[2] / "seatbooking" / "domain"


class TestWebinarRepositoryProtocol:
    """Tests for WebinarRepository protocol."""

    def test_has_find_by_id_method(self) -> None:
        assert hasattr(WebinarRepository, "find_by_id")

    def test_structural_implementation(self, webinars) -> None:
        def accepts_repository(r: WebinarRepository) -> None:
            pass

        accepts_repository(webinars)


class TestParticipationRepositoryProtocol:
    """Tests for ParticipationRepository protocol."""

    def test_has_find_by_webinar_id_method(self) -> None:
        assert hasattr(ParticipationRepository, "find_by_webinar_id")

    def test_has_save_method(self) -> None:
        assert hasattr(ParticipationRepository, "save")

    def test_save_accepts_participation(self) -> None:
        class MockRepo:
            def __init__(self) -> None:
                self.saved: list[Participation] = []

            def find_by_webinar_id(self, webinar_id: str) -> list[Participation]:
                return [p for p in self.saved if p.webinar_id == webinar_id]

            def save(self, participation: Participation) -> None:
                self.saved.append(participation)

        repo = MockRepo()
        repo.save(Participation("u", "w"))
        assert repo.find_by_webinar_id("w") == [Participation("u", "w")]


class TestUserRepositoryProtocol:
    """Tests for UserRepository protocol."""

    def test_has_find_by_id_method(self) -> None:
        assert hasattr(UserRepository, "find_by_id")

    def test_absent_user_is_none_not_error(self) -> None:
        class MockRepo:
            def find_by_id(self, user_id: str) -> User | None:
                return None

        assert MockRepo().find_by_id("nobody") is None


class TestMailerProtocol:
    """Tests for Mailer protocol."""

    def test_has_send_method(self) -> None:
        assert hasattr(Mailer, "send")

    def test_send_accepts_to_subject_body(self) -> None:
        class MockMailer:
            def __init__(self) -> None:
                self.sent: list[tuple[str, str, str]] = []

            def send(self, to: str, subject: str, body: str) -> None:
                self.sent.append((to, subject, body))

        mailer = MockMailer()
        mailer.send(to="a@example.com", subject="s", body="b")
        assert mailer.sent == [("a@example.com", "s", "b")]


class TestDomainExceptions:
    """Tests for domain exceptions."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            WebinarNotFound,
            AlreadyRegistered,
            WebinarTooSoon,
            CapacityTooHigh,
            CapacityTooLow,
            NoSeatsLeft,
            OrganizerContactMissing,
        ],
    )
    def test_inherits_booking_error(self, exc_type: type[BookingError]) -> None:
        assert issubclass(exc_type, BookingError)

    def test_booking_error_is_exception(self) -> None:
        assert issubclass(BookingError, Exception)

    @pytest.mark.parametrize(
        ("exc", "message"),
        [
            (WebinarNotFound("w"), "Webinar not found"),
            (AlreadyRegistered("u", "w"), "User is already registered"),
            (WebinarTooSoon("w"), "Webinar starts too soon"),
            (CapacityTooHigh("w"), "Webinar has too many seats"),
            (CapacityTooLow("w"), "Webinar has not enough seats"),
            (NoSeatsLeft("w"), "Webinar is full"),
            (OrganizerContactMissing("o"), "Email not found"),
        ],
    )
    def test_messages(self, exc: BookingError, message: str) -> None:
        assert str(exc) == message

    def test_exceptions_carry_ids(self) -> None:
        exc = AlreadyRegistered("u1", "w1")
        assert (exc.user_id, exc.webinar_id) == ("u1", "w1")
        assert WebinarNotFound("w2").webinar_id == "w2"
        assert OrganizerContactMissing("o3").organizer_id == "o3"

    def test_not_found_can_be_raised(self) -> None:
        with pytest.raises(WebinarNotFound):
            raise WebinarNotFound("w")


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize("framework", ["fastapi", "pydantic", "psycopg"])
    def test_no_framework_imports_in_domain(self, framework: str) -> None:
        for source in DOMAIN_DIR.glob("*.py"):
            text = source.read_text()
            assert f"from {framework}" not in text, f"{framework} import in {source.name}"
            assert f"import {framework}" not in text, f"{framework} import in {source.name}"

    def test_domain_entities_are_plain_dataclasses(self) -> None:
        assert "__dataclass_fields__" in vars(Webinar)
        assert "__dataclass_fields__" in vars(Participation)

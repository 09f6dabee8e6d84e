"""
PostgreSQL repository adapters - Implement the domain's repository ports.

This module provides PostgreSQL implementations of the webinar,
participation and user ports using psycopg3 with raw SQL.

Duplicate Protection
--------------------
The workflow's duplicate check runs under an in-process lock, which does
not help when several application processes share one database. The
participations table therefore carries a UNIQUE (user_id, webinar_id)
constraint; save() inserts with ON CONFLICT DO NOTHING and raises
AlreadyRegistered when no row was written.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from seatbooking.domain.entities import Participation, User, Webinar
from seatbooking.domain.exceptions import AlreadyRegistered, WebinarNotFound

logger = logging.getLogger(__name__)


class PostgresWebinarRepository:
    """
    Implements WebinarRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def find_by_id(self, webinar_id: str) -> Webinar:
        """
        Load a webinar by id.

        Raises:
            WebinarNotFound: If no row matches
        """
        sql = """
            SELECT id, organizer_id, title, start_date, end_date, seats
            FROM webinars
            WHERE id = %s
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (webinar_id,))
            row = cursor.fetchone()

        if row is None:
            raise WebinarNotFound(webinar_id)

        return Webinar(
            id=row[0],
            organizer_id=row[1],
            title=row[2],
            start_date=row[3],
            end_date=row[4],
            seats=row[5],
        )

    def create(self, webinar: Webinar) -> None:
        sql = """
            INSERT INTO webinars (id, organizer_id, title, start_date, end_date, seats)
            VALUES (%s, %s, %s, %s, %s, %s)
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                sql,
                (
                    webinar.id,
                    webinar.organizer_id,
                    webinar.title,
                    webinar.start_date,
                    webinar.end_date,
                    webinar.seats,
                ),
            )
            conn.commit()


class PostgresParticipationRepository:
    """Implements ParticipationRepository protocol via psycopg3."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def find_by_webinar_id(self, webinar_id: str) -> list[Participation]:
        sql = """
            SELECT user_id, webinar_id
            FROM participations
            WHERE webinar_id = %s
            ORDER BY created_at
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (webinar_id,))
            rows = cursor.fetchall()

        return [Participation(user_id=row[0], webinar_id=row[1]) for row in rows]

    def save(self, participation: Participation) -> None:
        """
        Insert a participation.

        Raises:
            AlreadyRegistered: If the (user_id, webinar_id) pair already exists
        """
        sql = """
            INSERT INTO participations (user_id, webinar_id, created_at)
            VALUES (%s, %s, NOW())
            ON CONFLICT (user_id, webinar_id) DO NOTHING
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (participation.user_id, participation.webinar_id))
            conn.commit()
            if cursor.rowcount != 1:
                raise AlreadyRegistered(participation.user_id, participation.webinar_id)


class PostgresUserRepository:
    """Implements UserRepository protocol via psycopg3."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def find_by_id(self, user_id: str) -> User | None:
        sql = "SELECT id, email FROM users WHERE id = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (user_id,))
            row = cursor.fetchone()

        if row is None:
            return None
        return User(id=row[0], email=row[1])

    def add(self, user: User) -> None:
        sql = """
            INSERT INTO users (id, email) VALUES (%s, %s)
            ON CONFLICT (id) DO UPDATE SET email = EXCLUDED.email
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (user.id, user.email))
            conn.commit()


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: seatbooking/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e

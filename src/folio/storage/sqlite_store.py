"""SQLite-backed repositories."""

from __future__ import annotations

import logging
import sqlite3
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import aiosqlite

from folio.models.content import Content
from folio.models.enums import (
    ACTIVE_ASSIGNMENT_STATUSES,
    AssignmentStatus,
    LifecycleState,
    Role,
)
from folio.models.review import ReviewAssignment
from folio.models.user import User
from folio.storage.base import ContentRepository, ReviewRepository, UserRepository

logger = logging.getLogger(__name__)


class SQLiteStore(UserRepository, ContentRepository, ReviewRepository):
    """SQLite storage for users, content, credited authors and reviews.

    The reviews table is optional. A database created with
    ``with_reviews=False`` (or one that predates the review subsystem) answers
    every assignment lookup with ``None``.
    """

    def __init__(self, db_path: Path, *, wal_mode: bool = True, with_reviews: bool = True) -> None:
        self.db_path = db_path
        self.wal_mode = wal_mode
        self.with_reviews = with_reviews
        self._db: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        """Create database and apply schema."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._db = await aiosqlite.connect(str(self.db_path))
        self._db.row_factory = aiosqlite.Row

        if self.wal_mode:
            await self._db.execute("PRAGMA journal_mode=WAL")
        await self._db.execute("PRAGMA foreign_keys=ON")

        await self._db.executescript(_load_sql("publishing.sql"))
        if self.with_reviews:
            await self._db.executescript(_load_sql("reviews.sql"))

        await self._db.commit()
        logger.info("Initialized SQLite store at %s", self.db_path)

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    @property
    def db(self) -> aiosqlite.Connection:
        if self._db is None:
            raise RuntimeError("Store not initialized. Call initialize() first.")
        return self._db

    # --- Users ---

    async def insert_user(self, user: dict[str, Any]) -> dict[str, Any]:
        row = {"email": None, "name": None, "role": Role.USER, **user}
        row["role"] = str(Role(row["role"]))
        await self.db.execute(
            "INSERT INTO users (id, email, name, role) VALUES (:id, :email, :name, :role)",
            row,
        )
        await self.db.commit()
        return row

    async def get_user(self, user_id: str) -> User | None:
        cursor = await self.db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
        row = await cursor.fetchone()
        return User(**dict(row)) if row else None

    async def update_user_role(self, user_id: str, role: str) -> bool:
        cursor = await self.db.execute(
            "UPDATE users SET role = ? WHERE id = ?", (str(Role(role)), user_id)
        )
        await self.db.commit()
        return cursor.rowcount > 0

    # --- Authors and content ---

    async def insert_author(self, author: dict[str, Any]) -> dict[str, Any]:
        row = {"email": None, **author}
        await self.db.execute(
            "INSERT INTO authors (id, name, email) VALUES (:id, :name, :email)", row
        )
        await self.db.commit()
        return row

    async def insert_content(self, content: dict[str, Any]) -> dict[str, Any]:
        row = {"title": "", "status": LifecycleState.DRAFT, **content}
        row["status"] = str(LifecycleState(row["status"]))
        row["created_at"] = datetime.now(UTC).isoformat()
        await self.db.execute(
            """INSERT INTO contents (id, title, status, created_at)
               VALUES (:id, :title, :status, :created_at)""",
            row,
        )
        await self.db.commit()
        return row

    async def credit_author(self, content_id: str, author_id: str, *, position: int = 0) -> None:
        await self.db.execute(
            """INSERT OR REPLACE INTO content_authors (content_id, author_id, position)
               VALUES (?, ?, ?)""",
            (content_id, author_id, position),
        )
        await self.db.commit()

    async def get_content(self, content_id: str) -> Content | None:
        cursor = await self.db.execute(
            "SELECT id, title, status FROM contents WHERE id = ?", (content_id,)
        )
        row = await cursor.fetchone()
        if not row:
            return None

        cursor = await self.db.execute(
            """SELECT authors.email FROM content_authors
               JOIN authors ON authors.id = content_authors.author_id
               WHERE content_authors.content_id = ? AND authors.email IS NOT NULL
               ORDER BY content_authors.position""",
            (content_id,),
        )
        emails = [r["email"] for r in await cursor.fetchall()]
        return Content(**dict(row), credited_author_emails=emails)

    async def update_content_status(self, content_id: str, status: str) -> bool:
        """Set a content item's lifecycle state. Raises ValueError for unknown states."""
        cursor = await self.db.execute(
            "UPDATE contents SET status = ?, updated_at = ? WHERE id = ?",
            (str(LifecycleState(status)), datetime.now(UTC).isoformat(), content_id),
        )
        await self.db.commit()
        return cursor.rowcount > 0

    # --- Reviews ---

    async def insert_review(self, review: dict[str, Any]) -> dict[str, Any]:
        row = ReviewAssignment(**review).to_storage()
        await self.db.execute(
            """INSERT INTO reviews (id, content_id, reviewer_id, status, created_at)
               VALUES (:id, :content_id, :reviewer_id, :status, :created_at)""",
            row,
        )
        await self.db.commit()
        return row

    async def update_review_status(self, review_id: str, status: str) -> bool:
        cursor = await self.db.execute(
            "UPDATE reviews SET status = ? WHERE id = ?",
            (str(AssignmentStatus(status)), review_id),
        )
        await self.db.commit()
        return cursor.rowcount > 0

    async def get_active_assignment(
        self, user_id: str, content_id: str
    ) -> ReviewAssignment | None:
        statuses = sorted(str(s) for s in ACTIVE_ASSIGNMENT_STATUSES)
        try:
            cursor = await self.db.execute(
                f"""SELECT * FROM reviews
                    WHERE content_id = ? AND reviewer_id = ?
                    AND status IN ({", ".join("?" * len(statuses))})
                    ORDER BY created_at DESC LIMIT 1""",
                (content_id, user_id, *statuses),
            )
        except sqlite3.OperationalError as exc:
            if "no such table" not in str(exc):
                raise
            logger.debug("Review subsystem absent in %s", self.db_path)
            return None
        row = await cursor.fetchone()
        return ReviewAssignment(**dict(row)) if row else None


# --- Helpers ---


def _load_sql(filename: str) -> str:
    """Load SQL file from the schema package."""
    schema_dir = Path(__file__).parent.parent / "schema"
    return (schema_dir / filename).read_text()

"""Shared test fixtures for Folio."""

from __future__ import annotations

from pathlib import Path

import pytest

from folio.config import Config
from folio.models import AssignmentStatus, Content, LifecycleState, ReviewAssignment, Role, User
from folio.policy.engine import PolicyEngine
from folio.storage.memory_store import InMemoryStore
from folio.storage.sqlite_store import SQLiteStore

CONTENT_ID = "c1"

USERS = {
    "admin": Role.ADMIN,
    "editor": Role.EDITOR,
    "reviewer": Role.REVIEWER,
    "other-reviewer": Role.REVIEWER,
    "author": Role.AUTHOR,
    "other-author": Role.AUTHOR,
    "reader": Role.USER,
}


@pytest.fixture
def memory_store() -> InMemoryStore:
    """One draft content item credited to "author", reviewed by "reviewer"."""
    s = InMemoryStore()
    for user_id, role in USERS.items():
        s.add_user(User(id=user_id, email=f"{user_id}@example.org", name=user_id, role=role))
    s.add_content(
        Content(
            id=CONTENT_ID,
            title="On Blind Review",
            status=LifecycleState.DRAFT,
            credited_author_emails=["author@example.org", "coauthor@example.org"],
        )
    )
    s.add_review(
        ReviewAssignment(
            id="r1",
            content_id=CONTENT_ID,
            reviewer_id="reviewer",
            status=AssignmentStatus.IN_PROGRESS,
        )
    )
    return s


@pytest.fixture
def engine(memory_store: InMemoryStore) -> PolicyEngine:
    return PolicyEngine(memory_store, memory_store, memory_store)


@pytest.fixture
def tmp_db(tmp_path: Path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
async def store(tmp_db: Path) -> SQLiteStore:
    s = SQLiteStore(tmp_db)
    await s.initialize()
    yield s
    await s.close()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(data_path=tmp_path)

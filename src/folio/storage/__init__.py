"""Folio storage layer."""

from folio.storage.base import (
    ContentRepository,
    NullReviewRepository,
    ReviewRepository,
    UserRepository,
)
from folio.storage.memory_store import InMemoryStore
from folio.storage.sqlite_store import SQLiteStore

__all__ = [
    "ContentRepository",
    "InMemoryStore",
    "NullReviewRepository",
    "ReviewRepository",
    "SQLiteStore",
    "UserRepository",
]

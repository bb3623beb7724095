"""Repository interfaces the policy engine reads from."""

from __future__ import annotations

from abc import ABC, abstractmethod

from folio.models.content import Content
from folio.models.review import ReviewAssignment
from folio.models.user import User


class UserRepository(ABC):
    """Identity lookup."""

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None:
        """Get a user by ID. Returns None if not found."""


class ContentRepository(ABC):
    """Content lookup, including credited author emails."""

    @abstractmethod
    async def get_content(self, content_id: str) -> Content | None:
        """Get a content item by ID. Returns None if not found."""


class ReviewRepository(ABC):
    """Review-assignment lookup."""

    @abstractmethod
    async def get_active_assignment(
        self, user_id: str, content_id: str
    ) -> ReviewAssignment | None:
        """Get the user's PENDING or IN_PROGRESS assignment on a content item."""


class NullReviewRepository(ReviewRepository):
    """Stand-in for deployments without a review subsystem."""

    async def get_active_assignment(
        self, user_id: str, content_id: str
    ) -> ReviewAssignment | None:
        return None

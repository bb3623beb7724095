"""Dict-backed repositories for tests and in-process callers."""

from __future__ import annotations

from folio.models.content import Content
from folio.models.enums import AssignmentStatus, LifecycleState
from folio.models.review import ReviewAssignment
from folio.models.user import User
from folio.storage.base import ContentRepository, ReviewRepository, UserRepository


class InMemoryStore(UserRepository, ContentRepository, ReviewRepository):
    """Holds users, content and review assignments in plain dicts.

    Lookups return copies so callers cannot mutate stored state through a
    returned model.
    """

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.contents: dict[str, Content] = {}
        self.reviews: dict[str, ReviewAssignment] = {}

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def add_content(self, content: Content) -> Content:
        self.contents[content.id] = content
        return content

    def add_review(self, review: ReviewAssignment) -> ReviewAssignment:
        self.reviews[review.id] = review
        return review

    def set_status(self, content_id: str, status: LifecycleState) -> None:
        self.contents[content_id].status = status

    def set_review_status(self, review_id: str, status: AssignmentStatus) -> None:
        self.reviews[review_id].status = status

    async def get_user(self, user_id: str) -> User | None:
        user = self.users.get(user_id)
        return user.model_copy() if user else None

    async def get_content(self, content_id: str) -> Content | None:
        content = self.contents.get(content_id)
        return content.model_copy(deep=True) if content else None

    async def get_active_assignment(
        self, user_id: str, content_id: str
    ) -> ReviewAssignment | None:
        for review in self.reviews.values():
            if (
                review.reviewer_id == user_id
                and review.content_id == content_id
                and review.is_active
            ):
                return review.model_copy()
        return None

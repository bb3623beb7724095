"""Relationship resolution between users and content items."""

from __future__ import annotations

import logging

from folio.models.content import Content
from folio.models.decision import Relationship
from folio.models.user import User
from folio.storage.base import (
    ContentRepository,
    NullReviewRepository,
    ReviewRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class RelationshipResolver:
    """Works out whether a user owns or is reviewing a content item.

    Every call reads the repositories afresh. Lookup failures of any kind
    resolve to ``False``.
    """

    def __init__(
        self,
        users: UserRepository,
        contents: ContentRepository,
        reviews: ReviewRepository | None = None,
    ) -> None:
        self._users = users
        self._contents = contents
        self._reviews = reviews or NullReviewRepository()

    async def is_owner(self, user_id: str, content_id: str) -> bool:
        """True iff the user's email matches a credited author of the content."""
        try:
            content = await self._contents.get_content(content_id)
            if not content:
                return False
            user = await self._users.get_user(user_id)
        except Exception:
            logger.warning(
                "Ownership lookup failed for user %s on content %s",
                user_id,
                content_id,
                exc_info=True,
            )
            return False
        if not user:
            return False
        return content.is_credited(user.email)

    async def is_reviewer(self, user_id: str, content_id: str) -> bool:
        """True iff the user holds a PENDING or IN_PROGRESS assignment on the content."""
        try:
            assignment = await self._reviews.get_active_assignment(user_id, content_id)
        except Exception:
            logger.warning(
                "Review assignment lookup failed for user %s on content %s",
                user_id,
                content_id,
                exc_info=True,
            )
            return False
        return assignment is not None and assignment.is_active

    async def resolve(self, user: User, content: Content) -> Relationship:
        """Relationship for entities the caller has already fetched."""
        return Relationship(
            is_owner=content.is_credited(user.email),
            is_reviewer=await self.is_reviewer(user.id, content.id),
        )

"""Policy decisions for users acting on content."""

from __future__ import annotations

import logging

from folio.config import Config
from folio.models.content import Content
from folio.models.decision import Decision
from folio.models.enums import Action, LifecycleState, ResourceType, ReviewMode, Role
from folio.models.user import User
from folio.policy import anonymity
from folio.policy.relationships import RelationshipResolver
from folio.policy.table import content_rule, general_rule
from folio.storage.base import ContentRepository, ReviewRepository, UserRepository

logger = logging.getLogger(__name__)


class _LookupFailed(Exception):
    """A repository raised while the engine was reading."""


class PolicyEngine:
    """Answers whether a user may perform an action, optionally on a content item.

    The engine holds no state between calls. Each question re-reads the user,
    the content and the review assignment, and anything that cannot be read
    (missing row, repository error, unknown action) is a denial.

    Results are advisory for rendering. An endpoint that mutates content must
    ask again at execution time.
    """

    def __init__(
        self,
        users: UserRepository,
        contents: ContentRepository,
        reviews: ReviewRepository | None = None,
        *,
        review_mode: ReviewMode | str = ReviewMode.SINGLE,
    ) -> None:
        self._users = users
        self._contents = contents
        self.relationships = RelationshipResolver(users, contents, reviews)
        self.review_mode = ReviewMode.parse(review_mode)

    @classmethod
    def from_config(
        cls,
        config: Config,
        users: UserRepository,
        contents: ContentRepository,
        reviews: ReviewRepository | None = None,
    ) -> PolicyEngine:
        if not config.review_subsystem:
            reviews = None
        return cls(users, contents, reviews, review_mode=config.mode)

    # --- Content-scoped decisions ---

    async def evaluate(self, user_id: str, action: Action | str, content_id: str) -> Decision:
        """Decide one action on one content item, with the reason for the outcome."""
        parsed = _parse_action(action)
        if parsed is None:
            return self._decided(user_id, action, content_id, False, "unknown_action")

        try:
            user = await self._get_user(user_id)
            if not user:
                return self._decided(user_id, parsed, content_id, False, "user_not_found")
            if user.role is Role.ADMIN:
                return self._decided(user_id, parsed, content_id, True, "admin")

            content = await self._get_content(content_id)
        except _LookupFailed:
            return self._decided(user_id, parsed, content_id, False, "store_error")
        if not content:
            return self._decided(user_id, parsed, content_id, False, "content_not_found")

        relationship = await self.relationships.resolve(user, content)
        rule = content_rule(content.status, parsed)
        allowed = rule(user.role, relationship.is_owner, relationship.is_reviewer)
        return self._decided(user_id, parsed, content_id, allowed, "policy_table")

    async def can_perform_action_on_content(
        self, user_id: str, action: Action | str, content_id: str
    ) -> bool:
        decision = await self.evaluate(user_id, action, content_id)
        return decision.allowed

    async def get_allowed_actions(self, user_id: str, content_id: str) -> list[Action]:
        """Every action the user may perform on the content, in enumeration order.

        For deciding which controls to show. Not an enforcement point.
        """
        allowed: list[Action] = []
        for action in Action:
            if await self.can_perform_action_on_content(user_id, action, content_id):
                allowed.append(action)
        return allowed

    # --- General decisions ---

    async def can_perform_action(
        self,
        user_id: str,
        action: Action | str,
        resource_type: ResourceType | str,
        resource_id: str | None = None,
    ) -> bool:
        """Check an action against a resource kind, or a concrete content item.

        Without a concrete content item the coarser role-only table applies,
        e.g. to ask whether a role may create content at all.
        """
        parsed = _parse_action(action)
        if parsed is None:
            return False
        try:
            kind = ResourceType(resource_type)
        except ValueError:
            logger.debug("Unknown resource type %r", resource_type)
            return False

        try:
            user = await self._get_user(user_id)
        except _LookupFailed:
            return False
        if not user:
            return False
        if user.role is Role.ADMIN:
            return True

        if kind is ResourceType.CONTENT and resource_id:
            return await self.can_perform_action_on_content(user_id, parsed, resource_id)

        return general_rule(parsed)(user.role)

    # --- Anonymity ---

    async def can_view_reviewer_assignment(self, user_id: str, content_id: str) -> bool:
        """Whether the user may learn who is assigned to review the content."""
        try:
            user = await self._get_user(user_id)
            if not user:
                return False
            match user.role:
                case Role.ADMIN | Role.EDITOR:
                    return True
                case Role.REVIEWER:
                    return await self.relationships.is_reviewer(user_id, content_id)
                case Role.AUTHOR:
                    content = await self._get_content(content_id)
                    if not content:
                        return False
                    return (
                        content.is_credited(user.email)
                        and content.status is LifecycleState.PUBLISHED
                    )
                case _:
                    return False
        except _LookupFailed:
            return False

    def can_reviewer_see_author(self, mode: ReviewMode | str | None = None) -> bool:
        """Anonymity check under ``mode``, or the engine's configured mode."""
        return anonymity.can_reviewer_see_author(mode or self.review_mode)

    def can_author_see_reviewer(self) -> bool:
        return anonymity.can_author_see_reviewer()

    # --- Helpers ---

    async def _get_user(self, user_id: str) -> User | None:
        try:
            return await self._users.get_user(user_id)
        except Exception as exc:
            logger.warning("User lookup failed for %s: %s", user_id, exc)
            raise _LookupFailed(user_id) from exc

    async def _get_content(self, content_id: str) -> Content | None:
        try:
            return await self._contents.get_content(content_id)
        except Exception as exc:
            logger.warning("Content lookup failed for %s: %s", content_id, exc)
            raise _LookupFailed(content_id) from exc

    @staticmethod
    def _decided(
        user_id: str,
        action: Action | str,
        content_id: str,
        allowed: bool,
        reason: str,
    ) -> Decision:
        logger.debug(
            "Policy decision: user=%s action=%s content=%s allowed=%s reason=%s",
            user_id,
            action,
            content_id,
            allowed,
            reason,
        )
        return Decision(action=action, allowed=allowed, reason=reason)


def _parse_action(action: Action | str) -> Action | None:
    try:
        return Action(action)
    except ValueError:
        logger.debug("Unknown action %r", action)
        return None

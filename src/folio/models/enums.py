"""Closed enumerations shared by the policy engine."""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    REVIEWER = "REVIEWER"
    AUTHOR = "AUTHOR"
    USER = "USER"


class LifecycleState(StrEnum):
    DRAFT = "DRAFT"
    REVIEW = "REVIEW"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class Action(StrEnum):
    # Declaration order is the order get_allowed_actions reports.
    CREATE_CONTENT = "create_content"
    EDIT_CONTENT = "edit_content"
    DELETE_CONTENT = "delete_content"
    VIEW_CONTENT = "view_content"
    SUBMIT_CONTENT = "submit_content"
    WITHDRAW_CONTENT = "withdraw_content"
    PUBLISH_CONTENT = "publish_content"
    ARCHIVE_CONTENT = "archive_content"
    ASSIGN_REVIEWER = "assign_reviewer"
    SUBMIT_REVIEW = "submit_review"
    VIEW_REVIEWER = "view_reviewer"
    VIEW_AUTHOR = "view_author"
    APPROVE_CONTENT = "approve_content"
    REJECT_CONTENT = "reject_content"
    REQUEST_REVISIONS = "request_revisions"


class ResourceType(StrEnum):
    CONTENT = "content"
    USER = "user"
    JOURNAL = "journal"
    REVIEW = "review"


class ReviewMode(StrEnum):
    SINGLE = "single"
    DOUBLE = "double"

    @classmethod
    def parse(cls, value: ReviewMode | str) -> ReviewMode:
        """Case-insensitive lookup. Raises ValueError for unknown modes."""
        return cls(str(value).strip().lower())


class AssignmentStatus(StrEnum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    DECLINED = "DECLINED"


ACTIVE_ASSIGNMENT_STATUSES = frozenset({AssignmentStatus.PENDING, AssignmentStatus.IN_PROGRESS})

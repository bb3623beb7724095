"""Folio data models."""

from folio.models.content import Content
from folio.models.decision import Decision, Relationship
from folio.models.enums import (
    ACTIVE_ASSIGNMENT_STATUSES,
    Action,
    AssignmentStatus,
    LifecycleState,
    ResourceType,
    ReviewMode,
    Role,
)
from folio.models.review import ReviewAssignment
from folio.models.user import User

__all__ = [
    "ACTIVE_ASSIGNMENT_STATUSES",
    "Action",
    "AssignmentStatus",
    "Content",
    "Decision",
    "LifecycleState",
    "Relationship",
    "ResourceType",
    "ReviewAssignment",
    "ReviewMode",
    "Role",
    "User",
]

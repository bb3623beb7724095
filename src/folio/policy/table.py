"""Workflow policy table: (lifecycle state, action) -> decision rule.

Each cell is a predicate over ``(role, is_owner, is_reviewer)``. ADMIN never
reaches this table; the engine grants it every action before lookup, so the
cells below are written for the remaining roles only.

Relationship terms are always gated by role. Ownership only counts for an
AUTHOR and assignment only counts for a REVIEWER, so a user who is both
owner and reviewer is judged by whichever relationship their role selects.

Both lookups end in ``assert_never``: a new ``LifecycleState`` or ``Action``
member without a matching case is a type-check error rather than a silent
runtime deny.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from folio.models.enums import Action, LifecycleState, Role

Rule = Callable[[Role, bool, bool], bool]
GeneralRule = Callable[[Role], bool]

_STAFF = frozenset({Role.EDITOR, Role.ADMIN})
_CREATORS = frozenset({Role.AUTHOR, Role.EDITOR, Role.ADMIN})
_REVIEW_ROLES = frozenset({Role.REVIEWER, Role.EDITOR, Role.ADMIN})


def _allow(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return True


def _deny(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return False


def _staff(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return role in _STAFF


def _creator(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return role in _CREATORS


def _staff_or_owner(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return role in _STAFF or (role is Role.AUTHOR and is_owner)


def _staff_or_reviewer(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return role in _STAFF or (role is Role.REVIEWER and is_reviewer)


def _staff_owner_or_reviewer(role: Role, is_owner: bool, is_reviewer: bool) -> bool:
    return (
        role in _STAFF
        or (role is Role.AUTHOR and is_owner)
        or (role is Role.REVIEWER and is_reviewer)
    )


def content_rule(state: LifecycleState, action: Action) -> Rule:
    """Return the rule for an action on content in the given state."""
    match state:
        case LifecycleState.DRAFT:
            return _draft_rule(action)
        case LifecycleState.REVIEW:
            return _review_rule(action)
        case LifecycleState.PUBLISHED:
            return _published_rule(action)
        case LifecycleState.ARCHIVED:
            return _archived_rule(action)
        case _:
            assert_never(state)


def _draft_rule(action: Action) -> Rule:
    match action:
        case Action.CREATE_CONTENT:
            return _creator
        case (
            Action.EDIT_CONTENT
            | Action.DELETE_CONTENT
            | Action.VIEW_CONTENT
            | Action.SUBMIT_CONTENT
        ):
            return _staff_or_owner
        case (
            Action.PUBLISH_CONTENT
            | Action.ARCHIVE_CONTENT
            | Action.ASSIGN_REVIEWER
            | Action.VIEW_REVIEWER
        ):
            return _staff
        case Action.VIEW_AUTHOR:
            return _allow
        # Nothing to withdraw, review or decide on before submission.
        case (
            Action.WITHDRAW_CONTENT
            | Action.SUBMIT_REVIEW
            | Action.APPROVE_CONTENT
            | Action.REJECT_CONTENT
            | Action.REQUEST_REVISIONS
        ):
            return _deny
        case _:
            assert_never(action)


def _review_rule(action: Action) -> Rule:
    match action:
        case Action.CREATE_CONTENT | Action.SUBMIT_CONTENT:
            return _deny
        case (
            Action.EDIT_CONTENT
            | Action.DELETE_CONTENT
            | Action.PUBLISH_CONTENT
            | Action.ARCHIVE_CONTENT
            | Action.ASSIGN_REVIEWER
            | Action.APPROVE_CONTENT
            | Action.REJECT_CONTENT
            | Action.REQUEST_REVISIONS
        ):
            return _staff
        case Action.VIEW_CONTENT:
            return _staff_owner_or_reviewer
        case Action.WITHDRAW_CONTENT:
            return _staff_or_owner
        case Action.SUBMIT_REVIEW:
            return _staff_or_reviewer
        # Single-blind: the owning author never learns who is reviewing.
        case Action.VIEW_REVIEWER:
            return _staff
        # ...while the assigned reviewer may see who wrote it.
        case Action.VIEW_AUTHOR:
            return _staff_or_reviewer
        case _:
            assert_never(action)


def _published_rule(action: Action) -> Rule:
    match action:
        case Action.VIEW_CONTENT | Action.VIEW_AUTHOR:
            return _allow
        # Metadata edits only; the caller restricts which fields.
        case Action.EDIT_CONTENT | Action.ARCHIVE_CONTENT:
            return _staff
        # Owner may learn the reviewer once the outcome is settled.
        case Action.VIEW_REVIEWER:
            return _staff_or_owner
        # Archival is the only removal path for published content.
        case (
            Action.CREATE_CONTENT
            | Action.DELETE_CONTENT
            | Action.SUBMIT_CONTENT
            | Action.WITHDRAW_CONTENT
            | Action.PUBLISH_CONTENT
            | Action.ASSIGN_REVIEWER
            | Action.SUBMIT_REVIEW
            | Action.APPROVE_CONTENT
            | Action.REJECT_CONTENT
            | Action.REQUEST_REVISIONS
        ):
            return _deny
        case _:
            assert_never(action)


def _archived_rule(action: Action) -> Rule:
    match action:
        case Action.VIEW_AUTHOR:
            return _allow
        case Action.VIEW_CONTENT:
            return _staff_or_owner
        # Delete is permanent here; publish restores.
        case Action.DELETE_CONTENT | Action.PUBLISH_CONTENT | Action.VIEW_REVIEWER:
            return _staff
        case (
            Action.CREATE_CONTENT
            | Action.EDIT_CONTENT
            | Action.SUBMIT_CONTENT
            | Action.WITHDRAW_CONTENT
            | Action.ARCHIVE_CONTENT
            | Action.ASSIGN_REVIEWER
            | Action.SUBMIT_REVIEW
            | Action.APPROVE_CONTENT
            | Action.REJECT_CONTENT
            | Action.REQUEST_REVISIONS
        ):
            return _deny
        case _:
            assert_never(action)


def _role_in(roles: frozenset[Role]) -> GeneralRule:
    def rule(role: Role) -> bool:
        return role in roles

    return rule


def _everyone(role: Role) -> bool:
    return True


def general_rule(action: Action) -> GeneralRule:
    """Role-only rule for checks made before any content item exists."""
    match action:
        case Action.VIEW_CONTENT | Action.VIEW_AUTHOR:
            return _everyone
        case Action.CREATE_CONTENT | Action.SUBMIT_CONTENT | Action.WITHDRAW_CONTENT:
            return _role_in(_CREATORS)
        case Action.SUBMIT_REVIEW:
            return _role_in(_REVIEW_ROLES)
        case (
            Action.EDIT_CONTENT
            | Action.DELETE_CONTENT
            | Action.PUBLISH_CONTENT
            | Action.ARCHIVE_CONTENT
            | Action.ASSIGN_REVIEWER
            | Action.VIEW_REVIEWER
            | Action.APPROVE_CONTENT
            | Action.REJECT_CONTENT
            | Action.REQUEST_REVISIONS
        ):
            return _role_in(_STAFF)
        case _:
            assert_never(action)

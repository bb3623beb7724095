"""Lifecycle state changes caused by workflow actions.

This module only says where an action moves content. Whether the caller may
perform it is the engine's question, and it must be asked again inside the
transaction that writes the new state.
"""

from __future__ import annotations

from typing import assert_never

from folio.models.enums import Action, LifecycleState


def target_state(action: Action) -> LifecycleState | None:
    """State content ends up in after the action, or None if the action does not move it."""
    match action:
        case Action.SUBMIT_CONTENT:
            return LifecycleState.REVIEW
        case Action.WITHDRAW_CONTENT | Action.REJECT_CONTENT | Action.REQUEST_REVISIONS:
            return LifecycleState.DRAFT
        case Action.PUBLISH_CONTENT | Action.APPROVE_CONTENT:
            return LifecycleState.PUBLISHED
        case Action.ARCHIVE_CONTENT:
            return LifecycleState.ARCHIVED
        case (
            Action.CREATE_CONTENT
            | Action.EDIT_CONTENT
            | Action.DELETE_CONTENT
            | Action.VIEW_CONTENT
            | Action.ASSIGN_REVIEWER
            | Action.SUBMIT_REVIEW
            | Action.VIEW_REVIEWER
            | Action.VIEW_AUTHOR
        ):
            return None
        case _:
            assert_never(action)


def next_state(state: LifecycleState, action: Action) -> LifecycleState | None:
    """New state if the action changes ``state``, else None."""
    target = target_state(action)
    if target is None or target == state:
        return None
    return target


def is_transition(action: Action) -> bool:
    return target_state(action) is not None

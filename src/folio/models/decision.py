"""Value objects produced while evaluating a policy question."""

from __future__ import annotations

from dataclasses import dataclass

from folio.models.enums import Action


@dataclass(frozen=True)
class Relationship:
    """How a user relates to a content item. Derived per query, never stored."""

    is_owner: bool = False
    is_reviewer: bool = False


@dataclass(frozen=True)
class Decision:
    """Outcome of a single policy check.

    ``reason`` is a short code callers can log: ``admin``, ``user_not_found``,
    ``content_not_found``, ``store_error``, ``unknown_action`` or
    ``policy_table``.
    """

    action: Action | str
    allowed: bool
    reason: str

    def __bool__(self) -> bool:
        return self.allowed

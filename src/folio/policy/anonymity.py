"""Review anonymity rules.

These hold independently of the policy table. The table's ``view_reviewer``
cells are written so they never grant an author more than these functions
and ``PolicyEngine.can_view_reviewer_assignment`` allow.
"""

from __future__ import annotations

from folio.models.enums import ReviewMode


def can_reviewer_see_author(mode: ReviewMode | str = ReviewMode.SINGLE) -> bool:
    """Reviewers see the author only under single-blind review."""
    try:
        return ReviewMode.parse(mode) is ReviewMode.SINGLE
    except ValueError:
        return False


def can_author_see_reviewer() -> bool:
    """Reviewers are anonymous to authors in both review modes."""
    return False

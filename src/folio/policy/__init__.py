"""Authorization and workflow policy."""

from folio.policy.anonymity import can_author_see_reviewer, can_reviewer_see_author
from folio.policy.engine import PolicyEngine
from folio.policy.relationships import RelationshipResolver
from folio.policy.table import content_rule, general_rule
from folio.policy.transitions import next_state, target_state

__all__ = [
    "PolicyEngine",
    "RelationshipResolver",
    "can_author_see_reviewer",
    "can_reviewer_see_author",
    "content_rule",
    "general_rule",
    "next_state",
    "target_state",
]

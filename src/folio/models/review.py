"""Review assignment model."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from folio.models.enums import ACTIVE_ASSIGNMENT_STATUSES, AssignmentStatus


class ReviewAssignment(BaseModel):
    """Binds a reviewer to a content item."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4())[:8])
    content_id: str
    reviewer_id: str
    status: AssignmentStatus = AssignmentStatus.PENDING
    created_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_ASSIGNMENT_STATUSES

    def to_storage(self) -> dict:
        return self.model_dump(mode="json")

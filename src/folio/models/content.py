"""Content item model."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from folio.models.enums import LifecycleState


class Content(BaseModel):
    """A content item with its lifecycle state and credited authors."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4())[:8])
    title: str = ""
    status: LifecycleState = LifecycleState.DRAFT
    credited_author_emails: list[str] = Field(default_factory=list)

    def is_credited(self, email: str | None) -> bool:
        """Check whether an email belongs to one of the credited authors."""
        if not email:
            return False
        return email in self.credited_author_emails

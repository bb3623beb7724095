"""User identity as seen by the policy engine."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field

from folio.models.enums import Role


class User(BaseModel):
    """A platform account with exactly one role."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4())[:8])
    email: str | None = None
    name: str | None = None
    role: Role = Role.USER

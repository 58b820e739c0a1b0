"""User aggregate root.

Users authenticate with the external identity provider. The local row only
mirrors the profile fields we display next to comments, endorsements and
memberships.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    external_id: str = Field(min_length=1, max_length=255)
    email: str
    name: Optional[str] = None
    location: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

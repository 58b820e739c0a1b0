"""Access request entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    OrganizationId,
    UserId,
)


class AccessRequest(DomainModel):
    """A user's request to join an organization, reviewed by its admins."""

    id: AccessRequestId
    organization_id: OrganizationId
    user_id: UserId
    status: AccessRequestStatus = AccessRequestStatus.PENDING
    message: Optional[str] = None
    reviewed_by_id: Optional[UserId] = None
    reviewed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_pending(self) -> bool:
        return self.status == AccessRequestStatus.PENDING

"""Endorsement entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import (
    EndorsementId,
    EndorsementType,
    OrganizationId,
    PolicyId,
    UserId,
)


class Endorsement(DomainModel):
    """Public support for a policy, from a user or an organization.

    Individual endorsements carry ``user_id``; organization endorsements
    carry ``organization_id``.
    """

    id: EndorsementId
    policy_id: PolicyId
    type: EndorsementType
    user_id: Optional[UserId] = None
    organization_id: Optional[OrganizationId] = None
    statement: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_endorser(self) -> "Endorsement":
        """Ensure the endorser matches the endorsement type."""
        if self.type == EndorsementType.INDIVIDUAL and self.user_id is None:
            raise ValueError("Individual endorsements require a user")
        if self.type == EndorsementType.ORGANIZATION and self.organization_id is None:
            raise ValueError("Organization endorsements require an organization")
        return self

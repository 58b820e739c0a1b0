"""Organization aggregate.

Organizations group users (members and admins) and own policies. An
organization may sit under a parent organization; members of a child can
see the parent's policies.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import MembershipId, MemberRole, OrganizationId, UserId

NAME_MAX_LENGTH = 100


class Organization(DomainModel):
    """Organization aggregate root."""

    id: OrganizationId
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    verified: bool = False
    parent_id: Optional[OrganizationId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class OrganizationMember(DomainModel):
    """Membership of a user in an organization."""

    id: MembershipId
    organization_id: OrganizationId
    user_id: UserId
    role: MemberRole = MemberRole.MEMBER
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        return self.role == MemberRole.ADMIN

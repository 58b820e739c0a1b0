"""List organizations use case."""

from datetime import datetime
from typing import Mapping, Sequence

from pydantic import BaseModel

from agora.domain.error import ValidationError
from agora.domain.model import Organization
from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PolicyService,
    UserService,
)
from agora.domain.value import Identity, MemberRole, OrganizationId


class OrganizationItem(BaseModel):
    """Organization with its engagement counts."""

    organization_id: str
    name: str
    description: str | None
    website: str | None
    logo_url: str | None
    verified: bool
    parent_id: str | None
    created_at: datetime
    member_count: int
    endorsement_count: int
    policy_count: int
    role: MemberRole | None = None  # Caller's role, when listing memberships


async def describe_organizations(
    organizations: Sequence[Organization],
    organization_service: OrganizationService,
    endorsement_service: EndorsementService,
    policy_service: PolicyService,
    roles: Mapping[OrganizationId, MemberRole] | None = None,
) -> list[OrganizationItem]:
    """Attach member, endorsement and policy counts to organizations."""
    ids = [o.id for o in organizations]
    members = await organization_service.count_members(ids)
    endorsements = await endorsement_service.count_by_organizations(ids)
    policies = await policy_service.count_by_organizations(ids)
    roles = roles or {}

    return [
        OrganizationItem(
            organization_id=str(o.id),
            name=o.name,
            description=o.description,
            website=o.website,
            logo_url=o.logo_url,
            verified=o.verified,
            parent_id=str(o.parent_id) if o.parent_id else None,
            created_at=o.created_at,
            member_count=members.get(o.id, 0),
            endorsement_count=endorsements.get(o.id, 0),
            policy_count=policies.get(o.id, 0),
            role=roles.get(o.id),
        )
        for o in organizations
    ]


class ListOrganizationsRequest(BaseModel):
    """List organizations request."""

    search: str | None = None
    membership: str | None = None  # "admin" or "member" to list the caller's own
    identity: Identity | None = None


class ListOrganizationsResponse(BaseModel):
    """List organizations response."""

    organizations: list[OrganizationItem]


class ListOrganizationsUseCase:
    """Use case for browsing organizations or listing the caller's own."""

    def __init__(
        self,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> None:
        self.organization_service = organization_service
        self.endorsement_service = endorsement_service
        self.policy_service = policy_service
        self.user_service = user_service

    async def execute(
        self, request: ListOrganizationsRequest
    ) -> ListOrganizationsResponse:
        """Execute list organizations flow.

        With ``membership`` set, returns the caller's organizations (only
        those they administer for ``admin``) with their role. Otherwise
        performs a public name search, newest first.

        Raises:
            ValidationError: If ``membership`` is not a known role, or is
                given without an identity
        """
        if request.membership:
            try:
                role = MemberRole(request.membership)
            except ValueError:
                raise ValidationError('Membership must be "admin" or "member".')
            if request.identity is None:
                raise ValidationError("Membership filter requires a signed-in user.")

            user = await self.user_service.ensure_user(request.identity)
            memberships = await self.organization_service.memberships_for_user(
                user.id, role=MemberRole.ADMIN if role == MemberRole.ADMIN else None
            )
            organizations = await self.organization_service.get_many(
                [m.organization_id for m in memberships]
            )
            ordered = [
                organizations[m.organization_id]
                for m in memberships
                if m.organization_id in organizations
            ]
            roles = {m.organization_id: m.role for m in memberships}
        else:
            ordered = await self.organization_service.search(request.search)
            roles = None

        return ListOrganizationsResponse(
            organizations=await describe_organizations(
                ordered,
                self.organization_service,
                self.endorsement_service,
                self.policy_service,
                roles=roles,
            )
        )

"""Get organization use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PolicyService,
    UserService,
)
from agora.domain.value import Identity, MemberRole, OrganizationId

from .list_organizations import OrganizationItem, describe_organizations


class OrganizationPolicyItem(BaseModel):
    """Policy published by the organization."""

    policy_id: str
    title: str
    category: str | None
    created_at: datetime


class OrganizationEndorsementItem(BaseModel):
    """Policy the organization endorsed."""

    endorsement_id: str
    policy_id: str
    policy_title: str | None
    policy_category: str | None
    statement: str | None
    created_at: datetime


class GetOrganizationRequest(BaseModel):
    """Get organization request."""

    organization_id: str  # UUID string
    identity: Identity | None = None


class GetOrganizationResponse(BaseModel):
    """Organization profile."""

    organization: OrganizationItem
    policies: list[OrganizationPolicyItem]
    endorsements: list[OrganizationEndorsementItem]
    membership_role: MemberRole | None  # Caller's role, None if not a member


class GetOrganizationUseCase:
    """Use case for an organization's public profile."""

    RECENT_LIMIT = 20

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

    async def execute(self, request: GetOrganizationRequest) -> GetOrganizationResponse:
        """Execute get organization flow.

        Raises:
            NotFoundError: If the organization doesn't exist
        """
        organization = await self.organization_service.get_organization(
            OrganizationId(UUID(request.organization_id))
        )

        policies = await self.policy_service.list_published(
            organization_ids=[organization.id], limit=self.RECENT_LIMIT
        )
        endorsements = await self.endorsement_service.list_for_organization(
            organization.id, limit=self.RECENT_LIMIT
        )
        endorsed = await self.policy_service.get_many(
            [e.policy_id for e in endorsements]
        )

        membership_role = None
        if request.identity is not None:
            user = await self.user_service.ensure_user(request.identity)
            membership = await self.organization_service.get_membership(
                organization.id, user.id
            )
            membership_role = membership.role if membership else None

        [item] = await describe_organizations(
            [organization],
            self.organization_service,
            self.endorsement_service,
            self.policy_service,
        )

        endorsement_items = []
        for endorsement in endorsements:
            policy = endorsed.get(endorsement.policy_id)
            endorsement_items.append(
                OrganizationEndorsementItem(
                    endorsement_id=str(endorsement.id),
                    policy_id=str(endorsement.policy_id),
                    policy_title=policy.title if policy else None,
                    policy_category=policy.category if policy else None,
                    statement=endorsement.statement,
                    created_at=endorsement.created_at,
                )
            )

        return GetOrganizationResponse(
            organization=item,
            policies=[
                OrganizationPolicyItem(
                    policy_id=str(p.id),
                    title=p.title,
                    category=p.category,
                    created_at=p.created_at,
                )
                for p in policies
            ],
            endorsements=endorsement_items,
            membership_role=membership_role,
        )

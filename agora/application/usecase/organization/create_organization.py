"""Create organization use case."""

from pydantic import BaseModel

from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PolicyService,
    UserService,
)
from agora.domain.value import Identity, MemberRole

from .list_organizations import OrganizationItem, describe_organizations


class CreateOrganizationRequest(BaseModel):
    """Create organization request."""

    identity: Identity
    name: str
    description: str | None = None
    website: str | None = None


class CreateOrganizationResponse(BaseModel):
    """Create organization response."""

    organization: OrganizationItem


class CreateOrganizationUseCase:
    """Use case for founding an organization. The founder becomes its admin."""

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
        self, request: CreateOrganizationRequest
    ) -> CreateOrganizationResponse:
        """Execute create organization flow.

        Raises:
            ValidationError: If the name is empty or too long
        """
        creator = await self.user_service.ensure_user(request.identity)
        organization = await self.organization_service.create_organization(
            creator,
            name=request.name,
            description=request.description,
            website=request.website,
        )

        [item] = await describe_organizations(
            [organization],
            self.organization_service,
            self.endorsement_service,
            self.policy_service,
            roles={organization.id: MemberRole.ADMIN},
        )
        return CreateOrganizationResponse(organization=item)

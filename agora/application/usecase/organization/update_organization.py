"""Update organization use case."""

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

UPDATABLE_FIELDS = {"name", "description", "website"}


class UpdateOrganizationRequest(BaseModel):
    """Update organization request.

    Only fields explicitly set on the request are changed.
    """

    organization_id: str  # UUID string
    identity: Identity
    name: str | None = None
    description: str | None = None
    website: str | None = None


class UpdateOrganizationResponse(BaseModel):
    """Update organization response."""

    organization: OrganizationItem


class UpdateOrganizationUseCase:
    """Use case for editing an organization's profile. Admins only."""

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
        self, request: UpdateOrganizationRequest
    ) -> UpdateOrganizationResponse:
        """Execute update organization flow.

        Raises:
            NotFoundError: If the organization doesn't exist
            NotAuthorizedError: If the caller is not an admin
            ValidationError: If the new name is empty or too long
        """
        user = await self.user_service.ensure_user(request.identity)
        changes = request.model_dump(
            include=UPDATABLE_FIELDS & request.model_fields_set
        )

        organization = await self.organization_service.update_organization(
            OrganizationId(UUID(request.organization_id)), user, **changes
        )

        [item] = await describe_organizations(
            [organization],
            self.organization_service,
            self.endorsement_service,
            self.policy_service,
            roles={organization.id: MemberRole.ADMIN},
        )
        return UpdateOrganizationResponse(organization=item)

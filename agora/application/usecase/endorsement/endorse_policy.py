"""Endorse policy use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PolicyService,
    UserService,
)
from agora.domain.value import Identity, OrganizationId, PolicyId


class EndorsePolicyRequest(BaseModel):
    """Endorse policy request."""

    policy_id: str  # UUID string
    identity: Identity
    organization_id: str | None = None  # Endorse on behalf of this organization
    statement: str | None = None


class EndorsePolicyResponse(BaseModel):
    """Endorsement state after the change."""

    endorsed: bool
    count: int


class EndorsePolicyUseCase:
    """Use case for endorsing a policy personally or as an organization."""

    def __init__(
        self,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        organization_service: OrganizationService,
        user_service: UserService,
    ) -> None:
        """Initialize endorse policy use case.

        Args:
            endorsement_service: Endorsement domain service
            policy_service: Policy domain service
            organization_service: Organization service for admin checks
            user_service: User domain service
        """
        self.endorsement_service = endorsement_service
        self.policy_service = policy_service
        self.organization_service = organization_service
        self.user_service = user_service

    async def execute(self, request: EndorsePolicyRequest) -> EndorsePolicyResponse:
        """Execute endorse flow.

        Raises:
            NotFoundError: If the policy or organization is not found
            NotAuthorizedError: If endorsing for an organization the caller
                doesn't administer
            BusinessRuleViolationError: If the endorser already endorsed
        """
        policy = await self.policy_service.get_published_policy(
            PolicyId(UUID(request.policy_id))
        )
        user = await self.user_service.ensure_user(request.identity)

        if request.organization_id:
            organization = await self.organization_service.get_organization(
                OrganizationId(UUID(request.organization_id))
            )
            await self.organization_service.require_admin(
                organization.id, user, "endorse on behalf of"
            )
            await self.endorsement_service.endorse_as_organization(
                policy, organization, statement=request.statement
            )
        else:
            await self.endorsement_service.endorse_as_user(
                policy, user, statement=request.statement
            )

        count = await self.endorsement_service.count_for_policy(policy.id)
        return EndorsePolicyResponse(endorsed=True, count=count)

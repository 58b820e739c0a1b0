"""Remove endorsement use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PolicyService,
    UserService,
)
from agora.domain.value import Identity, OrganizationId, PolicyId

from .endorse_policy import EndorsePolicyResponse


class RemoveEndorsementRequest(BaseModel):
    """Remove endorsement request."""

    policy_id: str  # UUID string
    identity: Identity
    organization_id: str | None = None  # Withdraw the organization's endorsement


class RemoveEndorsementUseCase:
    """Use case for withdrawing an endorsement."""

    def __init__(
        self,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        organization_service: OrganizationService,
        user_service: UserService,
    ) -> None:
        self.endorsement_service = endorsement_service
        self.policy_service = policy_service
        self.organization_service = organization_service
        self.user_service = user_service

    async def execute(
        self, request: RemoveEndorsementRequest
    ) -> EndorsePolicyResponse:
        """Execute remove endorsement flow.

        Raises:
            NotFoundError: If the policy, organization or endorsement is
                not found
            NotAuthorizedError: If withdrawing for an organization the caller
                doesn't administer
        """
        policy = await self.policy_service.get_policy(PolicyId(UUID(request.policy_id)))
        user = await self.user_service.ensure_user(request.identity)

        if request.organization_id:
            organization = await self.organization_service.get_organization(
                OrganizationId(UUID(request.organization_id))
            )
            await self.organization_service.require_admin(
                organization.id, user, "withdraw endorsements of"
            )
            await self.endorsement_service.withdraw_organization_endorsement(
                policy, organization
            )
        else:
            await self.endorsement_service.withdraw_user_endorsement(policy, user)

        count = await self.endorsement_service.count_for_policy(policy.id)
        return EndorsePolicyResponse(endorsed=False, count=count)

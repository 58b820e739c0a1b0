"""List accessible policies use case."""

from pydantic import BaseModel

from agora.domain.service import OrganizationService, PolicyService, UserService
from agora.domain.value import Identity


class AccessiblePolicyItem(BaseModel):
    """Policy the caller can reach through an organization."""

    policy_id: str
    title: str
    category: str | None
    organization_id: str | None
    organization_name: str | None


class ListAccessiblePoliciesRequest(BaseModel):
    """List accessible policies request."""

    identity: Identity


class ListAccessiblePoliciesResponse(BaseModel):
    """List accessible policies response."""

    policies: list[AccessiblePolicyItem]


class ListAccessiblePoliciesUseCase:
    """Use case listing policies owned by the caller's organizations.

    Used to pick a policy to compare against or endorse on behalf of an
    organization.
    """

    LIMIT = 200

    def __init__(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
    ) -> None:
        self.policy_service = policy_service
        self.user_service = user_service
        self.organization_service = organization_service

    async def execute(
        self, request: ListAccessiblePoliciesRequest
    ) -> ListAccessiblePoliciesResponse:
        """Execute list accessible policies flow.

        Returns:
            Up to 200 published policies of the caller's organizations and
            their parents; empty when the caller belongs to none
        """
        user = await self.user_service.ensure_user(request.identity)
        organization_ids = (
            await self.organization_service.accessible_organization_ids(user.id)
        )
        if not organization_ids:
            return ListAccessiblePoliciesResponse(policies=[])

        policies = await self.policy_service.list_published(
            organization_ids=organization_ids, limit=self.LIMIT
        )
        organizations = await self.organization_service.get_many(organization_ids)

        items = []
        for policy in policies:
            organization = organizations.get(policy.organization_id)
            items.append(
                AccessiblePolicyItem(
                    policy_id=str(policy.id),
                    title=policy.title,
                    category=policy.category,
                    organization_id=(
                        str(policy.organization_id) if policy.organization_id else None
                    ),
                    organization_name=organization.name if organization else None,
                )
            )
        return ListAccessiblePoliciesResponse(policies=items)

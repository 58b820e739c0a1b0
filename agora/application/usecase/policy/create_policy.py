"""Create policy use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.domain.service import OrganizationService, PolicyService, UserService
from agora.domain.value import Identity, OrganizationId, PolicyAnalysis


class CreatePolicyRequest(BaseModel):
    """Create policy request."""

    identity: Identity
    title: str
    content: str
    organization_id: str | None = None  # Publish on behalf of this organization
    target_law_name: str | None = None
    target_law_text: str | None = None
    analysis: PolicyAnalysis | None = None  # Precomputed analysis results


class CreatePolicyResponse(BaseModel):
    """Create policy response."""

    policy_id: str
    title: str


class CreatePolicyUseCase:
    """Use case for publishing a policy."""

    def __init__(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
    ) -> None:
        """Initialize create policy use case.

        Args:
            policy_service: Policy domain service
            user_service: User domain service
            organization_service: Organization service for membership checks
        """
        self.policy_service = policy_service
        self.user_service = user_service
        self.organization_service = organization_service

    async def execute(self, request: CreatePolicyRequest) -> CreatePolicyResponse:
        """Execute create policy flow.

        Steps:
        1. Resolve the author's local user
        2. If publishing for an organization, check it exists and the
           author belongs to it
        3. Create and publish the policy

        Raises:
            ValidationError: If title or content is invalid
            NotFoundError: If the organization doesn't exist
            NotAuthorizedError: If the author isn't a member of the organization
        """
        author = await self.user_service.ensure_user(request.identity)

        organization = None
        if request.organization_id:
            organization = await self.organization_service.get_organization(
                OrganizationId(UUID(request.organization_id))
            )
            await self.organization_service.require_member(
                organization.id, author, "publish policies for"
            )

        policy = await self.policy_service.create_policy(
            author=author,
            title=request.title,
            content=request.content,
            organization=organization,
            target_law_name=request.target_law_name,
            target_law_text=request.target_law_text,
            analysis=request.analysis,
        )
        logfire.info(
            "Policy published",
            policy_id=str(policy.id),
            organization_id=request.organization_id,
        )
        return CreatePolicyResponse(policy_id=str(policy.id), title=policy.title)

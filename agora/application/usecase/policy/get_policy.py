"""Get policy use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PetitionService,
    PolicyService,
    UserService,
)
from agora.domain.value import PolicyId


class PolicyAuthor(BaseModel):
    """Author details shown with a policy."""

    user_id: str
    name: str | None
    location: str | None


class GetPolicyRequest(BaseModel):
    """Get policy request."""

    policy_id: str  # UUID string


class GetPolicyResponse(BaseModel):
    """Full policy with engagement counts."""

    policy_id: str
    title: str
    content: str
    summary: str | None
    jurisdiction: str | None
    category: str | None
    target_law_name: str | None
    target_law_text: str | None
    readability_score: float | None
    potential_conflicts: str | None
    affected_groups: str | None
    published: bool
    published_at: datetime | None
    view_count: int
    created_at: datetime
    author: PolicyAuthor | None
    organization_id: str | None
    organization_name: str | None
    endorsement_count: int
    signature_count: int


class GetPolicyUseCase:
    """Use case for reading a policy. Each read counts as a view."""

    def __init__(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        petition_service: PetitionService,
    ) -> None:
        self.policy_service = policy_service
        self.user_service = user_service
        self.organization_service = organization_service
        self.endorsement_service = endorsement_service
        self.petition_service = petition_service

    async def execute(self, request: GetPolicyRequest) -> GetPolicyResponse:
        """Execute get policy flow.

        Raises:
            NotFoundError: If the policy is missing or deleted
        """
        policy = await self.policy_service.get_policy(
            PolicyId(UUID(request.policy_id))
        )
        await self.policy_service.record_view(policy.id)

        authors = await self.user_service.get_many([policy.author_id])
        author = authors.get(policy.author_id)
        organization = None
        if policy.organization_id:
            organizations = await self.organization_service.get_many(
                [policy.organization_id]
            )
            organization = organizations.get(policy.organization_id)

        return GetPolicyResponse(
            policy_id=str(policy.id),
            title=policy.title,
            content=policy.content,
            summary=policy.summary,
            jurisdiction=policy.jurisdiction,
            category=policy.category,
            target_law_name=policy.target_law_name,
            target_law_text=policy.target_law_text,
            readability_score=policy.readability_score,
            potential_conflicts=policy.potential_conflicts,
            affected_groups=policy.affected_groups,
            published=policy.published,
            published_at=policy.published_at,
            view_count=policy.view_count,
            created_at=policy.created_at,
            author=(
                PolicyAuthor(
                    user_id=str(author.id), name=author.name, location=author.location
                )
                if author
                else None
            ),
            organization_id=(
                str(policy.organization_id) if policy.organization_id else None
            ),
            organization_name=organization.name if organization else None,
            endorsement_count=await self.endorsement_service.count_for_policy(
                policy.id
            ),
            signature_count=await self.petition_service.count(policy.id),
        )

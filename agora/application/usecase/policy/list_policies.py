"""List policies use case."""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from agora.domain.model import Policy
from agora.domain.service import (
    EndorsementService,
    OrganizationService,
    PetitionService,
    PolicyService,
    UserService,
)
from agora.domain.value import Identity


class PolicySummary(BaseModel):
    """Policy item in listings."""

    policy_id: str
    title: str
    summary: str | None
    category: str | None
    jurisdiction: str | None
    published_at: datetime | None
    view_count: int
    author_name: str | None
    author_location: str | None
    organization_id: str | None
    organization_name: str | None
    endorsement_count: int
    signature_count: int


async def summarize_policies(
    policies: Sequence[Policy],
    user_service: UserService,
    organization_service: OrganizationService,
    endorsement_service: EndorsementService,
    petition_service: PetitionService,
) -> list[PolicySummary]:
    """Attach author, organization and engagement counts to policies."""
    authors = await user_service.get_many([p.author_id for p in policies])
    organizations = await organization_service.get_many(
        [p.organization_id for p in policies if p.organization_id]
    )
    policy_ids = [p.id for p in policies]
    endorsement_counts = await endorsement_service.count_by_policies(policy_ids)
    signature_counts = await petition_service.count_by_policies(policy_ids)

    summaries = []
    for policy in policies:
        author = authors.get(policy.author_id)
        organization = (
            organizations.get(policy.organization_id)
            if policy.organization_id
            else None
        )
        summaries.append(
            PolicySummary(
                policy_id=str(policy.id),
                title=policy.title,
                summary=policy.summary,
                category=policy.category,
                jurisdiction=policy.jurisdiction,
                published_at=policy.published_at,
                view_count=policy.view_count,
                author_name=author.name if author else None,
                author_location=author.location if author else None,
                organization_id=(
                    str(policy.organization_id) if policy.organization_id else None
                ),
                organization_name=organization.name if organization else None,
                endorsement_count=endorsement_counts.get(policy.id, 0),
                signature_count=signature_counts.get(policy.id, 0),
            )
        )
    return summaries


class ListPoliciesRequest(BaseModel):
    """List policies request."""

    identity: Identity | None = None  # Verified caller, if signed in


class ListPoliciesResponse(BaseModel):
    """List policies response."""

    policies: list[PolicySummary]


class ListPoliciesUseCase:
    """Use case for the policy feed.

    Signed-out callers see nothing. Members of organizations see the
    policies of their organizations and those organizations' parents;
    everyone else sees all published policies.
    """

    LIMIT = 50

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

    async def execute(self, request: ListPoliciesRequest) -> ListPoliciesResponse:
        """Execute list policies flow.

        Args:
            request: Optional caller identity

        Returns:
            Up to 50 published policies, most recently published first
        """
        if request.identity is None:
            return ListPoliciesResponse(policies=[])

        user = await self.user_service.ensure_user(request.identity)
        organization_ids = (
            await self.organization_service.accessible_organization_ids(user.id)
        )

        policies = await self.policy_service.list_published(
            organization_ids=organization_ids or None, limit=self.LIMIT
        )
        return ListPoliciesResponse(
            policies=await summarize_policies(
                policies,
                self.user_service,
                self.organization_service,
                self.endorsement_service,
                self.petition_service,
            )
        )

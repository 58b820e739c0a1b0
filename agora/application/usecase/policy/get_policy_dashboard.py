"""Policy dashboard use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import DashboardService, PolicyService, UserService
from agora.domain.value import Identity, PolicyId


class DashboardPolicy(BaseModel):
    policy_id: str
    title: str
    published: bool
    published_at: datetime | None
    created_at: datetime
    view_count: int


class DashboardStats(BaseModel):
    views: int
    total_endorsements: int
    individual_endorsements: int
    organization_endorsements: int
    verified_signatures: int
    total_signatures: int
    comments: int


class SignatureTimelinePoint(BaseModel):
    date: str  # YYYY-MM-DD, UTC
    total: int


class EndorsementTimelinePoint(BaseModel):
    date: str  # YYYY-MM-DD, UTC
    individual: int
    organization: int


class LocationItem(BaseModel):
    location: str
    count: int


class GetPolicyDashboardRequest(BaseModel):
    """Policy dashboard request."""

    policy_id: str  # UUID string
    identity: Identity


class GetPolicyDashboardResponse(BaseModel):
    """Policy dashboard response."""

    policy: DashboardPolicy
    stats: DashboardStats
    signature_timeline: list[SignatureTimelinePoint]
    endorsement_timeline: list[EndorsementTimelinePoint]
    top_locations: list[LocationItem]


class GetPolicyDashboardUseCase:
    """Use case for a policy author's engagement dashboard."""

    def __init__(
        self,
        dashboard_service: DashboardService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> None:
        """Initialize dashboard use case.

        Args:
            dashboard_service: Dashboard aggregation service
            policy_service: Policy domain service
            user_service: User domain service
        """
        self.dashboard_service = dashboard_service
        self.policy_service = policy_service
        self.user_service = user_service

    async def execute(
        self, request: GetPolicyDashboardRequest
    ) -> GetPolicyDashboardResponse:
        """Execute dashboard flow.

        Raises:
            NotFoundError: If the policy is missing or deleted
            NotAuthorizedError: If the caller isn't the author
        """
        user = await self.user_service.ensure_user(request.identity)
        policy = await self.policy_service.get_policy(
            PolicyId(UUID(request.policy_id))
        )
        self.policy_service.require_author(policy, user, "view the dashboard of")

        dashboard = await self.dashboard_service.build(policy)

        return GetPolicyDashboardResponse(
            policy=DashboardPolicy(
                policy_id=str(policy.id),
                title=policy.title,
                published=policy.published,
                published_at=policy.published_at,
                created_at=policy.created_at,
                view_count=policy.view_count,
            ),
            stats=DashboardStats(
                views=policy.view_count,
                total_endorsements=dashboard.total_endorsements,
                individual_endorsements=dashboard.individual_endorsements,
                organization_endorsements=dashboard.organization_endorsements,
                verified_signatures=dashboard.verified_signatures,
                total_signatures=dashboard.total_signatures,
                comments=dashboard.active_comments,
            ),
            signature_timeline=[
                SignatureTimelinePoint(date=p.date, total=p.total)
                for p in dashboard.signature_timeline
            ],
            endorsement_timeline=[
                EndorsementTimelinePoint(
                    date=p.date, individual=p.individual, organization=p.organization
                )
                for p in dashboard.endorsement_timeline
            ],
            top_locations=[
                LocationItem(location=loc.location, count=loc.count)
                for loc in dashboard.top_locations
            ],
        )

"""Policy dashboard aggregation.

Builds the statistics an author sees for their own policy: engagement
counts and day-by-day cumulative growth of signatures and endorsements.
"""

from collections import Counter
from dataclasses import dataclass

import logfire

from agora.domain.model import Endorsement, PetitionSignature, Policy
from agora.domain.repository import (
    CommentRepository,
    EndorsementRepository,
    PetitionSignatureRepository,
)
from agora.domain.value import EndorsementType

from .base import Service

TOP_LOCATIONS = 10


@dataclass
class SignaturePoint:
    """Cumulative signatures at the end of a UTC day."""

    date: str
    total: int


@dataclass
class EndorsementPoint:
    """Cumulative endorsements by type at the end of a UTC day."""

    date: str
    individual: int
    organization: int


@dataclass
class LocationCount:
    location: str
    count: int


@dataclass
class PolicyDashboard:
    """Everything shown on a policy's author dashboard."""

    policy: Policy
    total_endorsements: int
    individual_endorsements: int
    organization_endorsements: int
    verified_signatures: int
    total_signatures: int
    active_comments: int
    signature_timeline: list[SignaturePoint]
    endorsement_timeline: list[EndorsementPoint]
    top_locations: list[LocationCount]


def signature_timeline(signatures: list[PetitionSignature]) -> list[SignaturePoint]:
    """Running total of signatures per day, one point per day with activity."""
    per_day = Counter(s.created_at.date().isoformat() for s in signatures)
    timeline = []
    total = 0
    for day in sorted(per_day):
        total += per_day[day]
        timeline.append(SignaturePoint(date=day, total=total))
    return timeline


def endorsement_timeline(endorsements: list[Endorsement]) -> list[EndorsementPoint]:
    """Running totals of endorsements per day, split by endorser type."""
    individual_per_day: Counter[str] = Counter()
    organization_per_day: Counter[str] = Counter()
    for endorsement in endorsements:
        day = endorsement.created_at.date().isoformat()
        if endorsement.type == EndorsementType.ORGANIZATION:
            organization_per_day[day] += 1
        else:
            individual_per_day[day] += 1

    timeline = []
    individual = organization = 0
    for day in sorted(set(individual_per_day) | set(organization_per_day)):
        individual += individual_per_day[day]
        organization += organization_per_day[day]
        timeline.append(
            EndorsementPoint(date=day, individual=individual, organization=organization)
        )
    return timeline


def top_locations(
    signatures: list[PetitionSignature], limit: int = TOP_LOCATIONS
) -> list[LocationCount]:
    """Most common signer locations, ties in first-seen order."""
    counts = Counter(s.location for s in signatures if s.location)
    return [
        LocationCount(location=location, count=count)
        for location, count in counts.most_common(limit)
    ]


class DashboardService(Service):
    """Domain service assembling the policy author dashboard."""

    def __init__(
        self,
        signature_repository: PetitionSignatureRepository,
        endorsement_repository: EndorsementRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize dashboard service.

        Args:
            signature_repository: Petition signature repository
            endorsement_repository: Endorsement repository
            comment_repository: Comment repository
        """
        self.signature_repository = signature_repository
        self.endorsement_repository = endorsement_repository
        self.comment_repository = comment_repository

    async def build(self, policy: Policy) -> PolicyDashboard:
        """Aggregate dashboard data for a policy.

        Authorization is the caller's responsibility.
        """
        with logfire.span("dashboard_service.build", policy_id=str(policy.id)):
            signatures = await self.signature_repository.find_by_policy(policy.id)
            endorsements = await self.endorsement_repository.find_by_policy(policy.id)
            active_comments = await self.comment_repository.count_by_policy(policy.id)

            organization_endorsements = sum(
                1 for e in endorsements if e.type == EndorsementType.ORGANIZATION
            )
            dashboard = PolicyDashboard(
                policy=policy,
                total_endorsements=len(endorsements),
                individual_endorsements=len(endorsements) - organization_endorsements,
                organization_endorsements=organization_endorsements,
                verified_signatures=sum(1 for s in signatures if s.email_verified),
                total_signatures=len(signatures),
                active_comments=active_comments,
                signature_timeline=signature_timeline(signatures),
                endorsement_timeline=endorsement_timeline(endorsements),
                top_locations=top_locations(signatures),
            )
            logfire.info(
                "Dashboard built",
                policy_id=str(policy.id),
                signatures=dashboard.total_signatures,
                endorsements=dashboard.total_endorsements,
            )
            return dashboard

"""In-memory endorsement repository for testing."""

from typing import Optional, Sequence

from agora.domain.model.endorsement import Endorsement
from agora.domain.repository.endorsement import EndorsementRepository
from agora.domain.value import (
    EndorsementId,
    EndorsementType,
    OrganizationId,
    PolicyId,
    UserId,
)


class InMemoryEndorsementRepository(EndorsementRepository):
    """In-memory implementation of EndorsementRepository for testing."""

    def __init__(self) -> None:
        self._endorsements: dict[EndorsementId, Endorsement] = {}

    def _newest_first(self, endorsements: list[Endorsement]) -> list[Endorsement]:
        return sorted(endorsements, key=lambda e: e.created_at, reverse=True)

    async def find_by_policy(self, policy_id: PolicyId) -> list[Endorsement]:
        """List a policy's endorsements, newest first."""
        return self._newest_first(
            [e for e in self._endorsements.values() if e.policy_id == policy_id]
        )

    async def find_by_organization(
        self, organization_id: OrganizationId, limit: int = 20
    ) -> list[Endorsement]:
        """List an organization's endorsements, newest first."""
        endorsements = self._newest_first(
            [
                e
                for e in self._endorsements.values()
                if e.organization_id == organization_id
            ]
        )
        return endorsements[:limit]

    async def find_individual(
        self, policy_id: PolicyId, user_id: UserId
    ) -> Optional[Endorsement]:
        """Find a user's personal endorsement of a policy."""
        for e in self._endorsements.values():
            if (
                e.policy_id == policy_id
                and e.user_id == user_id
                and e.type == EndorsementType.INDIVIDUAL
            ):
                return e
        return None

    async def find_by_organization_and_policy(
        self, organization_id: OrganizationId, policy_id: PolicyId
    ) -> Optional[Endorsement]:
        """Find an organization's endorsement of a policy."""
        for e in self._endorsements.values():
            if e.organization_id == organization_id and e.policy_id == policy_id:
                return e
        return None

    async def save(self, endorsement: Endorsement) -> Endorsement:
        """Save an endorsement."""
        self._endorsements[endorsement.id] = endorsement
        return endorsement

    async def delete(self, endorsement: Endorsement) -> None:
        """Remove an endorsement."""
        self._endorsements.pop(endorsement.id, None)

    async def count_by_policy(self, policy_id: PolicyId) -> int:
        """Count all endorsements of a policy."""
        return sum(1 for e in self._endorsements.values() if e.policy_id == policy_id)

    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count endorsements of each policy."""
        counts: dict[PolicyId, int] = {}
        wanted = set(policy_ids)
        for e in self._endorsements.values():
            if e.policy_id in wanted:
                counts[e.policy_id] = counts.get(e.policy_id, 0) + 1
        return counts

    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count endorsements made by each organization."""
        counts: dict[OrganizationId, int] = {}
        wanted = set(organization_ids)
        for e in self._endorsements.values():
            if e.organization_id in wanted:
                counts[e.organization_id] = counts.get(e.organization_id, 0) + 1
        return counts

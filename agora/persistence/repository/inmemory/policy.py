"""In-memory policy repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from agora.domain.model.policy import Policy
from agora.domain.repository.policy import PolicyRepository
from agora.domain.value import OrganizationId, PolicyId

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryPolicyRepository(PolicyRepository):
    """In-memory implementation of PolicyRepository for testing."""

    def __init__(self) -> None:
        self._policies: dict[PolicyId, Policy] = {}

    async def find_by_id(self, policy_id: PolicyId) -> Optional[Policy]:
        """Find a policy by ID."""
        return self._policies.get(policy_id)

    async def find_by_ids(self, policy_ids: Sequence[PolicyId]) -> list[Policy]:
        """Find several policies at once."""
        return [self._policies[i] for i in policy_ids if i in self._policies]

    async def find_published(
        self,
        organization_ids: Optional[Sequence[OrganizationId]] = None,
        limit: int = 50,
    ) -> list[Policy]:
        """Find published policies, most recently published first."""
        policies = [p for p in self._policies.values() if p.is_visible]

        if organization_ids is not None:
            wanted = set(organization_ids)
            policies = [p for p in policies if p.organization_id in wanted]

        policies.sort(
            key=lambda p: (p.published_at or _EPOCH, p.created_at), reverse=True
        )
        return policies[:limit]

    async def save(self, policy: Policy) -> Policy:
        """Save a policy."""
        self._policies[policy.id] = policy
        return policy

    async def increment_view_count(self, policy_id: PolicyId) -> None:
        """Increment the view counter."""
        policy = self._policies.get(policy_id)
        if policy:
            self._policies[policy_id] = policy.model_copy(
                update={"view_count": policy.view_count + 1}
            )

    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count non-deleted policies per organization."""
        counts: dict[OrganizationId, int] = {}
        wanted = set(organization_ids)
        for policy in self._policies.values():
            if policy.organization_id in wanted and not policy.is_deleted:
                counts[policy.organization_id] = (
                    counts.get(policy.organization_id, 0) + 1
                )
        return counts

"""Policy repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.policy import Policy
from agora.domain.value import OrganizationId, PolicyId


class PolicyRepository(ABC):
    """Repository for Policy aggregate."""

    @abstractmethod
    async def find_by_id(self, policy_id: PolicyId) -> Optional[Policy]:
        """Find a policy by ID, including soft-deleted ones.

        Args:
            policy_id: The policy's unique identifier

        Returns:
            The policy if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, policy_ids: Sequence[PolicyId]) -> list[Policy]:
        """Find several policies at once, including soft-deleted ones.

        Args:
            policy_ids: Policy IDs to look up

        Returns:
            The policies that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_published(
        self,
        organization_ids: Optional[Sequence[OrganizationId]] = None,
        limit: int = 50,
    ) -> list[Policy]:
        """Find published, non-deleted policies, most recently published first.

        Args:
            organization_ids: Restrict to policies owned by these
                organizations. None means no restriction.
            limit: Maximum number of policies to return

        Returns:
            List of policies
        """
        pass

    @abstractmethod
    async def save(self, policy: Policy) -> Policy:
        """Save a policy (create or update).

        Args:
            policy: The policy to save

        Returns:
            The saved policy
        """
        pass

    @abstractmethod
    async def increment_view_count(self, policy_id: PolicyId) -> None:
        """Atomically increment the view counter.

        Args:
            policy_id: The policy ID
        """
        pass

    @abstractmethod
    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count non-deleted policies per organization.

        Args:
            organization_ids: Organizations to count for

        Returns:
            Mapping of organization ID to count (missing keys mean zero)
        """
        pass

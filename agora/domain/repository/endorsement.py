"""Endorsement repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.endorsement import Endorsement
from agora.domain.value import OrganizationId, PolicyId, UserId


class EndorsementRepository(ABC):
    """Repository for Endorsement entity."""

    @abstractmethod
    async def find_by_policy(self, policy_id: PolicyId) -> list[Endorsement]:
        """List a policy's endorsements, newest first."""
        pass

    @abstractmethod
    async def find_by_organization(
        self, organization_id: OrganizationId, limit: int = 20
    ) -> list[Endorsement]:
        """List an organization's endorsements, newest first."""
        pass

    @abstractmethod
    async def find_individual(
        self, policy_id: PolicyId, user_id: UserId
    ) -> Optional[Endorsement]:
        """Find a user's personal endorsement of a policy."""
        pass

    @abstractmethod
    async def find_by_organization_and_policy(
        self, organization_id: OrganizationId, policy_id: PolicyId
    ) -> Optional[Endorsement]:
        """Find an organization's endorsement of a policy."""
        pass

    @abstractmethod
    async def save(self, endorsement: Endorsement) -> Endorsement:
        """Save an endorsement."""
        pass

    @abstractmethod
    async def delete(self, endorsement: Endorsement) -> None:
        """Remove an endorsement."""
        pass

    @abstractmethod
    async def count_by_policy(self, policy_id: PolicyId) -> int:
        """Count all endorsements of a policy."""
        pass

    @abstractmethod
    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count endorsements of each policy. Policies with none are omitted."""
        pass

    @abstractmethod
    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count endorsements made by each organization."""
        pass

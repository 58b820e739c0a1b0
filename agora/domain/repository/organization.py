"""Organization repository interface.

Memberships are part of the organization aggregate and are persisted
through the same repository.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from agora.domain.model.organization import Organization, OrganizationMember
from agora.domain.value import MemberRole, OrganizationId, UserId


class OrganizationRepository(ABC):
    """Repository for Organization aggregate and its memberships."""

    @abstractmethod
    async def find_by_id(self, organization_id: OrganizationId) -> Optional[Organization]:
        """Find an organization by ID.

        Args:
            organization_id: The organization's unique identifier

        Returns:
            The organization if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, organization_ids: Sequence[OrganizationId]
    ) -> list[Organization]:
        """Batch lookup of organizations.

        Args:
            organization_ids: Organization IDs to fetch

        Returns:
            Organizations that exist, in no particular order
        """
        pass

    @abstractmethod
    async def search(self, query: Optional[str] = None) -> list[Organization]:
        """List organizations, newest first.

        Args:
            query: Case-insensitive substring to match against the name

        Returns:
            Matching organizations
        """
        pass

    @abstractmethod
    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update).

        Args:
            organization: The organization to save

        Returns:
            The saved organization
        """
        pass

    @abstractmethod
    async def find_member(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[OrganizationMember]:
        """Find a user's membership in an organization.

        Args:
            organization_id: The organization ID
            user_id: The user ID

        Returns:
            The membership if the user belongs to the organization
        """
        pass

    @abstractmethod
    async def find_members(
        self, organization_id: OrganizationId
    ) -> list[OrganizationMember]:
        """List memberships of an organization, oldest first.

        Args:
            organization_id: The organization ID

        Returns:
            Memberships
        """
        pass

    @abstractmethod
    async def find_memberships_by_user(
        self, user_id: UserId, role: Optional[MemberRole] = None
    ) -> list[OrganizationMember]:
        """List a user's memberships.

        Args:
            user_id: The user ID
            role: Only return memberships with this role

        Returns:
            Memberships
        """
        pass

    @abstractmethod
    async def save_member(self, member: OrganizationMember) -> OrganizationMember:
        """Save a membership (create or update).

        Args:
            member: The membership to save

        Returns:
            The saved membership
        """
        pass

    @abstractmethod
    async def delete_member(self, member: OrganizationMember) -> None:
        """Remove a membership.

        Args:
            member: The membership to remove
        """
        pass

    @abstractmethod
    async def count_members(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count members per organization.

        Args:
            organization_ids: Organizations to count for

        Returns:
            Mapping of organization ID to count (missing keys mean zero)
        """
        pass

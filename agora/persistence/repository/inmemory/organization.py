"""In-memory organization repository for testing."""

from typing import Optional, Sequence

from agora.domain.model.organization import Organization, OrganizationMember
from agora.domain.repository.organization import OrganizationRepository
from agora.domain.value import MemberRole, MembershipId, OrganizationId, UserId


class InMemoryOrganizationRepository(OrganizationRepository):
    """In-memory implementation of OrganizationRepository for testing."""

    def __init__(self) -> None:
        self._organizations: dict[OrganizationId, Organization] = {}
        self._members: dict[MembershipId, OrganizationMember] = {}

    async def find_by_id(self, organization_id: OrganizationId) -> Optional[Organization]:
        """Find an organization by ID."""
        return self._organizations.get(organization_id)

    async def find_by_ids(
        self, organization_ids: Sequence[OrganizationId]
    ) -> list[Organization]:
        """Find several organizations at once."""
        return [
            self._organizations[i] for i in organization_ids if i in self._organizations
        ]

    async def search(self, query: Optional[str] = None) -> list[Organization]:
        """List organizations newest first, optionally filtered."""
        organizations = list(self._organizations.values())
        if query:
            needle = query.lower()
            organizations = [o for o in organizations if needle in o.name.lower()]
        organizations.sort(key=lambda o: o.created_at, reverse=True)
        return organizations

    async def save(self, organization: Organization) -> Organization:
        """Save an organization."""
        self._organizations[organization.id] = organization
        return organization

    async def find_member(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[OrganizationMember]:
        """Find a user's membership in an organization."""
        for member in self._members.values():
            if member.organization_id == organization_id and member.user_id == user_id:
                return member
        return None

    async def find_members(
        self, organization_id: OrganizationId
    ) -> list[OrganizationMember]:
        """List memberships of an organization, oldest first."""
        members = [
            m for m in self._members.values() if m.organization_id == organization_id
        ]
        members.sort(key=lambda m: m.created_at)
        return members

    async def find_memberships_by_user(
        self, user_id: UserId, role: Optional[MemberRole] = None
    ) -> list[OrganizationMember]:
        """List a user's memberships."""
        members = [m for m in self._members.values() if m.user_id == user_id]
        if role is not None:
            members = [m for m in members if m.role == role]
        members.sort(key=lambda m: m.created_at)
        return members

    async def save_member(self, member: OrganizationMember) -> OrganizationMember:
        """Save a membership."""
        self._members[member.id] = member
        return member

    async def delete_member(self, member: OrganizationMember) -> None:
        """Remove a membership."""
        self._members.pop(member.id, None)

    async def count_members(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count members per organization."""
        counts: dict[OrganizationId, int] = {}
        wanted = set(organization_ids)
        for member in self._members.values():
            if member.organization_id in wanted:
                counts[member.organization_id] = (
                    counts.get(member.organization_id, 0) + 1
                )
        return counts

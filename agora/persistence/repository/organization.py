"""PostgreSQL implementation of Organization repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Organization, OrganizationMember
from agora.domain.repository import OrganizationRepository
from agora.domain.value import MemberRole, OrganizationId, UserId
from agora.persistence.mappers import (
    member_to_dict,
    organization_to_dict,
    row_to_member,
    row_to_organization,
)
from agora.persistence.tables import organization_members_table, organizations_table


class PostgresOrganizationRepository(OrganizationRepository):
    """PostgreSQL implementation of OrganizationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, organization_id: OrganizationId) -> Optional[Organization]:
        """Find an organization by ID."""
        stmt = select(organizations_table).where(
            organizations_table.c.id == organization_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_organization(dict(row)) if row else None

    async def find_by_ids(
        self, organization_ids: Sequence[OrganizationId]
    ) -> list[Organization]:
        """Find several organizations at once. Unknown IDs are skipped."""
        if not organization_ids:
            return []
        stmt = select(organizations_table).where(
            organizations_table.c.id.in_(list(organization_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_organization(dict(row)) for row in result.mappings().all()]

    async def search(self, query: Optional[str] = None) -> list[Organization]:
        """List organizations, optionally filtered by a name substring.

        Args:
            query: Case-insensitive name fragment

        Returns:
            Organizations, newest first
        """
        stmt = select(organizations_table)
        if query:
            stmt = stmt.where(
                organizations_table.c.name.icontains(query, autoescape=True)
            )
        stmt = stmt.order_by(organizations_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_organization(dict(row)) for row in result.mappings().all()]

    async def save(self, organization: Organization) -> Organization:
        """Save an organization (create or update)."""
        existing = await self.find_by_id(organization.id)

        organization_dict = organization_to_dict(organization)

        if existing:
            stmt = (
                organizations_table.update()
                .where(organizations_table.c.id == organization.id)
                .values(**organization_dict)
            )
        else:
            stmt = organizations_table.insert().values(**organization_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return organization

    async def find_member(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Optional[OrganizationMember]:
        """Find a user's membership in an organization."""
        stmt = select(organization_members_table).where(
            organization_members_table.c.organization_id == organization_id,
            organization_members_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    async def find_members(
        self, organization_id: OrganizationId
    ) -> list[OrganizationMember]:
        """List memberships of an organization, oldest first."""
        stmt = (
            select(organization_members_table)
            .where(organization_members_table.c.organization_id == organization_id)
            .order_by(organization_members_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_member(dict(row)) for row in result.mappings().all()]

    async def find_memberships_by_user(
        self, user_id: UserId, role: Optional[MemberRole] = None
    ) -> list[OrganizationMember]:
        """List a user's memberships, optionally for one role."""
        stmt = select(organization_members_table).where(
            organization_members_table.c.user_id == user_id
        )
        if role is not None:
            stmt = stmt.where(organization_members_table.c.role == role.value)
        stmt = stmt.order_by(organization_members_table.c.created_at)

        result = await self.session.execute(stmt)
        return [row_to_member(dict(row)) for row in result.mappings().all()]

    async def save_member(self, member: OrganizationMember) -> OrganizationMember:
        """Save a membership (create or update)."""
        member_dict = member_to_dict(member)

        stmt = select(organization_members_table.c.id).where(
            organization_members_table.c.id == member.id
        )
        existing = (await self.session.execute(stmt)).first()

        if existing:
            stmt = (
                organization_members_table.update()
                .where(organization_members_table.c.id == member.id)
                .values(**member_dict)
            )
        else:
            stmt = organization_members_table.insert().values(**member_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return member

    async def delete_member(self, member: OrganizationMember) -> None:
        """Remove a membership."""
        stmt = organization_members_table.delete().where(
            organization_members_table.c.id == member.id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_members(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count members per organization."""
        if not organization_ids:
            return {}
        stmt = (
            select(organization_members_table.c.organization_id, func.count())
            .where(
                organization_members_table.c.organization_id.in_(
                    list(organization_ids)
                )
            )
            .group_by(organization_members_table.c.organization_id)
        )
        result = await self.session.execute(stmt)
        return {
            OrganizationId(organization_id): count
            for organization_id, count in result.all()
        }

"""PostgreSQL implementation of Endorsement repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Endorsement
from agora.domain.repository import EndorsementRepository
from agora.domain.value import EndorsementType, OrganizationId, PolicyId, UserId
from agora.persistence.mappers import endorsement_to_dict, row_to_endorsement
from agora.persistence.tables import endorsements_table


class PostgresEndorsementRepository(EndorsementRepository):
    """PostgreSQL implementation of EndorsementRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_policy(self, policy_id: PolicyId) -> list[Endorsement]:
        """List a policy's endorsements, newest first."""
        stmt = (
            select(endorsements_table)
            .where(endorsements_table.c.policy_id == policy_id)
            .order_by(endorsements_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_endorsement(dict(row)) for row in result.mappings().all()]

    async def find_by_organization(
        self, organization_id: OrganizationId, limit: int = 20
    ) -> list[Endorsement]:
        """List an organization's endorsements, newest first."""
        stmt = (
            select(endorsements_table)
            .where(endorsements_table.c.organization_id == organization_id)
            .order_by(endorsements_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_endorsement(dict(row)) for row in result.mappings().all()]

    async def find_individual(
        self, policy_id: PolicyId, user_id: UserId
    ) -> Optional[Endorsement]:
        """Find a user's personal endorsement of a policy."""
        stmt = select(endorsements_table).where(
            endorsements_table.c.policy_id == policy_id,
            endorsements_table.c.user_id == user_id,
            endorsements_table.c.type == EndorsementType.INDIVIDUAL.value,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_endorsement(dict(row)) if row else None

    async def find_by_organization_and_policy(
        self, organization_id: OrganizationId, policy_id: PolicyId
    ) -> Optional[Endorsement]:
        """Find an organization's endorsement of a policy."""
        stmt = select(endorsements_table).where(
            endorsements_table.c.organization_id == organization_id,
            endorsements_table.c.policy_id == policy_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_endorsement(dict(row)) if row else None

    async def save(self, endorsement: Endorsement) -> Endorsement:
        """Insert an endorsement. Endorsements are never edited."""
        stmt = endorsements_table.insert().values(**endorsement_to_dict(endorsement))
        await self.session.execute(stmt)
        await self.session.flush()
        return endorsement

    async def delete(self, endorsement: Endorsement) -> None:
        """Remove an endorsement."""
        stmt = endorsements_table.delete().where(
            endorsements_table.c.id == endorsement.id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_policy(self, policy_id: PolicyId) -> int:
        """Count all endorsements of a policy."""
        stmt = (
            select(func.count())
            .select_from(endorsements_table)
            .where(endorsements_table.c.policy_id == policy_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count endorsements of each policy in one query."""
        if not policy_ids:
            return {}
        stmt = (
            select(endorsements_table.c.policy_id, func.count())
            .where(endorsements_table.c.policy_id.in_(list(policy_ids)))
            .group_by(endorsements_table.c.policy_id)
        )
        result = await self.session.execute(stmt)
        return {PolicyId(policy_id): count for policy_id, count in result.all()}

    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count endorsements made by each organization."""
        if not organization_ids:
            return {}
        stmt = (
            select(endorsements_table.c.organization_id, func.count())
            .where(endorsements_table.c.organization_id.in_(list(organization_ids)))
            .group_by(endorsements_table.c.organization_id)
        )
        result = await self.session.execute(stmt)
        return {
            OrganizationId(organization_id): count
            for organization_id, count in result.all()
        }

"""PostgreSQL implementation of Policy repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Policy
from agora.domain.repository import PolicyRepository
from agora.domain.value import OrganizationId, PolicyId
from agora.persistence.mappers import policy_to_dict, row_to_policy
from agora.persistence.tables import policies_table


class PostgresPolicyRepository(PolicyRepository):
    """PostgreSQL implementation of PolicyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, policy_id: PolicyId) -> Optional[Policy]:
        """Find a policy by ID, including soft-deleted ones.

        Args:
            policy_id: Policy ID to look up

        Returns:
            Policy if found, None otherwise
        """
        stmt = select(policies_table).where(policies_table.c.id == policy_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_policy(dict(row)) if row else None

    async def find_by_ids(self, policy_ids: Sequence[PolicyId]) -> list[Policy]:
        """Find several policies at once. Unknown IDs are skipped."""
        if not policy_ids:
            return []
        stmt = select(policies_table).where(policies_table.c.id.in_(list(policy_ids)))
        result = await self.session.execute(stmt)
        return [row_to_policy(dict(row)) for row in result.mappings().all()]

    async def find_published(
        self,
        organization_ids: Optional[Sequence[OrganizationId]] = None,
        limit: int = 50,
    ) -> list[Policy]:
        """Find published policies, most recently published first.

        Args:
            organization_ids: Restrict to these organizations (None for all)
            limit: Maximum number of policies to return

        Returns:
            List of policies
        """
        stmt = select(policies_table).where(
            policies_table.c.published.is_(True),
            policies_table.c.deleted_at.is_(None),
        )

        if organization_ids is not None:
            if not organization_ids:
                return []
            stmt = stmt.where(
                policies_table.c.organization_id.in_(list(organization_ids))
            )

        stmt = stmt.order_by(
            policies_table.c.published_at.desc().nulls_last(),
            policies_table.c.created_at.desc(),
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_policy(dict(row)) for row in result.mappings().all()]

    async def save(self, policy: Policy) -> Policy:
        """Save a policy (create or update).

        Args:
            policy: Policy to save

        Returns:
            Saved policy
        """
        existing = await self.find_by_id(policy.id)

        policy_dict = policy_to_dict(policy)

        if existing:
            stmt = (
                policies_table.update()
                .where(policies_table.c.id == policy.id)
                .values(**policy_dict)
            )
        else:
            stmt = policies_table.insert().values(**policy_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return policy

    async def increment_view_count(self, policy_id: PolicyId) -> None:
        """Atomically increment the view counter.

        Runs inside a savepoint so a failed update leaves the surrounding
        request transaction usable.

        Args:
            policy_id: Policy ID to update
        """
        stmt = (
            policies_table.update()
            .where(policies_table.c.id == policy_id)
            .values(view_count=policies_table.c.view_count + 1)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def count_by_organizations(
        self, organization_ids: Sequence[OrganizationId]
    ) -> dict[OrganizationId, int]:
        """Count non-deleted policies per organization."""
        if not organization_ids:
            return {}
        stmt = (
            select(policies_table.c.organization_id, func.count())
            .where(policies_table.c.organization_id.in_(list(organization_ids)))
            .where(policies_table.c.deleted_at.is_(None))
            .group_by(policies_table.c.organization_id)
        )
        result = await self.session.execute(stmt)
        return {
            OrganizationId(organization_id): count
            for organization_id, count in result.all()
        }

"""PostgreSQL implementation of AccessRequest repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import AccessRequest
from agora.domain.repository import AccessRequestRepository
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    OrganizationId,
    UserId,
)
from agora.persistence.mappers import access_request_to_dict, row_to_access_request
from agora.persistence.tables import access_requests_table


class PostgresAccessRequestRepository(AccessRequestRepository):
    """PostgreSQL implementation of AccessRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, request_id: AccessRequestId) -> Optional[AccessRequest]:
        """Find an access request by ID."""
        stmt = select(access_requests_table).where(
            access_requests_table.c.id == request_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_request(dict(row)) if row else None

    async def find_by_user_and_organization(
        self, user_id: UserId, organization_id: OrganizationId
    ) -> Optional[AccessRequest]:
        """Find the request a user made to an organization."""
        stmt = select(access_requests_table).where(
            access_requests_table.c.user_id == user_id,
            access_requests_table.c.organization_id == organization_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_request(dict(row)) if row else None

    async def find_by_organization(
        self, organization_id: OrganizationId, status: AccessRequestStatus
    ) -> list[AccessRequest]:
        """List an organization's requests with a status, oldest first."""
        stmt = (
            select(access_requests_table)
            .where(access_requests_table.c.organization_id == organization_id)
            .where(access_requests_table.c.status == status.value)
            .order_by(access_requests_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_access_request(dict(row)) for row in result.mappings().all()]

    async def save(self, access_request: AccessRequest) -> AccessRequest:
        """Save an access request (create or update)."""
        existing = await self.find_by_id(access_request.id)

        request_dict = access_request_to_dict(access_request)

        if existing:
            stmt = (
                access_requests_table.update()
                .where(access_requests_table.c.id == access_request.id)
                .values(**request_dict)
            )
        else:
            stmt = access_requests_table.insert().values(**request_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return access_request

"""PostgreSQL implementation of PetitionSignature repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import PetitionSignature
from agora.domain.repository import PetitionSignatureRepository
from agora.domain.value import PolicyId, UserId
from agora.persistence.mappers import row_to_signature, signature_to_dict
from agora.persistence.tables import petition_signatures_table


class PostgresPetitionSignatureRepository(PetitionSignatureRepository):
    """PostgreSQL implementation of PetitionSignatureRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_by_id(self, signature_id) -> Optional[PetitionSignature]:
        stmt = select(petition_signatures_table).where(
            petition_signatures_table.c.id == signature_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_signature(dict(row)) if row else None

    async def find_by_policy_and_user(
        self, policy_id: PolicyId, user_id: UserId
    ) -> Optional[PetitionSignature]:
        """Find a user's signature on a policy."""
        stmt = select(petition_signatures_table).where(
            petition_signatures_table.c.policy_id == policy_id,
            petition_signatures_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_signature(dict(row)) if row else None

    async def find_by_token(self, token: str) -> Optional[PetitionSignature]:
        """Find a signature by its pending verification token."""
        stmt = select(petition_signatures_table).where(
            petition_signatures_table.c.verification_token == token
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_signature(dict(row)) if row else None

    async def find_by_policy(
        self,
        policy_id: PolicyId,
        verified_only: bool = False,
        limit: Optional[int] = None,
    ) -> list[PetitionSignature]:
        """List a policy's signatures, newest first."""
        stmt = select(petition_signatures_table).where(
            petition_signatures_table.c.policy_id == policy_id
        )
        if verified_only:
            stmt = stmt.where(petition_signatures_table.c.email_verified.is_(True))
        stmt = stmt.order_by(petition_signatures_table.c.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_signature(dict(row)) for row in result.mappings().all()]

    async def count_by_policy(
        self, policy_id: PolicyId, verified_only: bool = False
    ) -> int:
        """Count a policy's signatures."""
        stmt = (
            select(func.count())
            .select_from(petition_signatures_table)
            .where(petition_signatures_table.c.policy_id == policy_id)
        )
        if verified_only:
            stmt = stmt.where(petition_signatures_table.c.email_verified.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_policies(
        self, policy_ids: Sequence[PolicyId]
    ) -> dict[PolicyId, int]:
        """Count signatures of each policy in one query."""
        if not policy_ids:
            return {}
        stmt = (
            select(petition_signatures_table.c.policy_id, func.count())
            .where(petition_signatures_table.c.policy_id.in_(list(policy_ids)))
            .group_by(petition_signatures_table.c.policy_id)
        )
        result = await self.session.execute(stmt)
        return {PolicyId(policy_id): count for policy_id, count in result.all()}

    async def save(self, signature: PetitionSignature) -> PetitionSignature:
        """Save a signature (create or update)."""
        existing = await self._find_by_id(signature.id)

        signature_dict = signature_to_dict(signature)

        if existing:
            stmt = (
                petition_signatures_table.update()
                .where(petition_signatures_table.c.id == signature.id)
                .values(**signature_dict)
            )
        else:
            stmt = petition_signatures_table.insert().values(**signature_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return signature

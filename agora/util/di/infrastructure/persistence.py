"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agora.config import Settings
from agora.domain.repository import (
    AccessRequestRepository,
    CommentRepository,
    EndorsementRepository,
    OrganizationRepository,
    PetitionSignatureRepository,
    PolicyRepository,
    UserRepository,
)
from agora.persistence.database import create_engine, create_session_factory
from agora.persistence.repository import (
    PostgresAccessRequestRepository,
    PostgresCommentRepository,
    PostgresEndorsementRepository,
    PostgresOrganizationRepository,
    PostgresPetitionSignatureRepository,
    PostgresPolicyRepository,
    PostgresUserRepository,
)
from agora.util.di.base import ProviderBase
from agora.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Every write a request
        makes (an approved access request and its new membership, say)
        lands in the same transaction.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_policy_repository(self, session: AsyncSession) -> PolicyRepository:
        """Provide Policy repository."""
        return PostgresPolicyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_organization_repository(
        self, session: AsyncSession
    ) -> OrganizationRepository:
        """Provide Organization repository."""
        return PostgresOrganizationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_request_repository(
        self, session: AsyncSession
    ) -> AccessRequestRepository:
        """Provide AccessRequest repository."""
        return PostgresAccessRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_endorsement_repository(
        self, session: AsyncSession
    ) -> EndorsementRepository:
        """Provide Endorsement repository."""
        return PostgresEndorsementRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_petition_signature_repository(
        self, session: AsyncSession
    ) -> PetitionSignatureRepository:
        """Provide PetitionSignature repository."""
        return PostgresPetitionSignatureRepository(session)

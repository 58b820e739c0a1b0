"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agora.domain.repository import (
    AccessRequestRepository,
    CommentRepository,
    EndorsementRepository,
    OrganizationRepository,
    PetitionSignatureRepository,
    PolicyRepository,
    UserRepository,
)
from agora.persistence.repository.inmemory import (
    InMemoryAccessRequestRepository,
    InMemoryCommentRepository,
    InMemoryEndorsementRepository,
    InMemoryOrganizationRepository,
    InMemoryPetitionSignatureRepository,
    InMemoryPolicyRepository,
    InMemoryUserRepository,
)
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data written in one request is visible to the next,
    like a database would be. Each test builds its own container, so tests
    stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_policy_repository(self) -> PolicyRepository:
        """Provide in-memory policy repository."""
        return InMemoryPolicyRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_organization_repository(self) -> OrganizationRepository:
        """Provide in-memory organization repository."""
        return InMemoryOrganizationRepository()

    @provide(scope=Scope.APP)
    def get_access_request_repository(self) -> AccessRequestRepository:
        """Provide in-memory access request repository."""
        return InMemoryAccessRequestRepository()

    @provide(scope=Scope.APP)
    def get_endorsement_repository(self) -> EndorsementRepository:
        """Provide in-memory endorsement repository."""
        return InMemoryEndorsementRepository()

    @provide(scope=Scope.APP)
    def get_petition_signature_repository(self) -> PetitionSignatureRepository:
        """Provide in-memory petition signature repository."""
        return InMemoryPetitionSignatureRepository()

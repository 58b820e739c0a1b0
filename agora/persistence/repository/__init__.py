"""PostgreSQL repository implementations."""

from agora.persistence.repository.access_request import PostgresAccessRequestRepository
from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.endorsement import PostgresEndorsementRepository
from agora.persistence.repository.organization import PostgresOrganizationRepository
from agora.persistence.repository.petition_signature import (
    PostgresPetitionSignatureRepository,
)
from agora.persistence.repository.policy import PostgresPolicyRepository
from agora.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPolicyRepository",
    "PostgresCommentRepository",
    "PostgresOrganizationRepository",
    "PostgresAccessRequestRepository",
    "PostgresEndorsementRepository",
    "PostgresPetitionSignatureRepository",
]

"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import APISettings, AuthSettings, CommentSettings
from agora.domain.repository import (
    AccessRequestRepository,
    CommentRepository,
    EndorsementRepository,
    OrganizationRepository,
    PetitionSignatureRepository,
    PolicyRepository,
    UserRepository,
)
from agora.domain.service import (
    AccessRequestService,
    CommentService,
    DashboardService,
    EndorsementService,
    JWTService,
    OrganizationService,
    PetitionService,
    PolicyService,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, settings=comment_settings
        )

    @provide
    def get_policy_service(self, policy_repository: PolicyRepository) -> PolicyService:
        """Provide policy domain service."""
        return PolicyService(policy_repository=policy_repository)

    @provide
    def get_organization_service(
        self, organization_repository: OrganizationRepository
    ) -> OrganizationService:
        """Provide organization domain service."""
        return OrganizationService(organization_repository=organization_repository)

    @provide
    def get_access_request_service(
        self,
        access_request_repository: AccessRequestRepository,
        organization_service: OrganizationService,
    ) -> AccessRequestService:
        """Provide access request domain service."""
        return AccessRequestService(
            access_request_repository=access_request_repository,
            organization_service=organization_service,
        )

    @provide
    def get_endorsement_service(
        self, endorsement_repository: EndorsementRepository
    ) -> EndorsementService:
        """Provide endorsement domain service."""
        return EndorsementService(endorsement_repository=endorsement_repository)

    @provide
    def get_petition_service(
        self,
        signature_repository: PetitionSignatureRepository,
        api_settings: APISettings,
    ) -> PetitionService:
        """Provide petition domain service."""
        return PetitionService(
            signature_repository=signature_repository, api_settings=api_settings
        )

    @provide
    def get_dashboard_service(
        self,
        signature_repository: PetitionSignatureRepository,
        endorsement_repository: EndorsementRepository,
        comment_repository: CommentRepository,
    ) -> DashboardService:
        """Provide policy dashboard aggregation service."""
        return DashboardService(
            signature_repository=signature_repository,
            endorsement_repository=endorsement_repository,
            comment_repository=comment_repository,
        )

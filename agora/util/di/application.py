"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    VoteCommentUseCase,
)
from agora.application.usecase.endorsement import (
    EndorsePolicyUseCase,
    ListEndorsementsUseCase,
    RemoveEndorsementUseCase,
)
from agora.application.usecase.organization import (
    CreateOrganizationUseCase,
    GetOrganizationUseCase,
    JoinOrganizationUseCase,
    ListAccessRequestsUseCase,
    ListMembersUseCase,
    ListOrganizationsUseCase,
    RemoveMemberUseCase,
    RequestAccessUseCase,
    ReviewAccessRequestUseCase,
    UpdateOrganizationUseCase,
)
from agora.application.usecase.petition import (
    ListSignaturesUseCase,
    SignPetitionUseCase,
    VerifySignatureUseCase,
)
from agora.application.usecase.policy import (
    CreatePolicyUseCase,
    DeletePolicyUseCase,
    GetPolicyDashboardUseCase,
    GetPolicyUseCase,
    ListAccessiblePoliciesUseCase,
    ListPoliciesUseCase,
)
from agora.domain.service import (
    AccessRequestService,
    CommentService,
    DashboardService,
    EndorsementService,
    OrganizationService,
    PetitionService,
    PolicyService,
    UserService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, policy_service: PolicyService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, policy_service=policy_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> VoteCommentUseCase:
        """Provide vote use case."""
        return VoteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Policy use cases
    @provide(scope=Scope.REQUEST)
    def get_create_policy_use_case(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
    ) -> CreatePolicyUseCase:
        """Provide create policy use case."""
        return CreatePolicyUseCase(
            policy_service=policy_service,
            user_service=user_service,
            organization_service=organization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_policy_use_case(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        petition_service: PetitionService,
    ) -> GetPolicyUseCase:
        """Provide get policy use case."""
        return GetPolicyUseCase(
            policy_service=policy_service,
            user_service=user_service,
            organization_service=organization_service,
            endorsement_service=endorsement_service,
            petition_service=petition_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_policies_use_case(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        petition_service: PetitionService,
    ) -> ListPoliciesUseCase:
        """Provide list policies use case."""
        return ListPoliciesUseCase(
            policy_service=policy_service,
            user_service=user_service,
            organization_service=organization_service,
            endorsement_service=endorsement_service,
            petition_service=petition_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_accessible_policies_use_case(
        self,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
    ) -> ListAccessiblePoliciesUseCase:
        """Provide list accessible policies use case."""
        return ListAccessiblePoliciesUseCase(
            policy_service=policy_service,
            user_service=user_service,
            organization_service=organization_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_policy_use_case(
        self, policy_service: PolicyService, user_service: UserService
    ) -> DeletePolicyUseCase:
        """Provide delete policy use case."""
        return DeletePolicyUseCase(
            policy_service=policy_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_policy_dashboard_use_case(
        self,
        dashboard_service: DashboardService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> GetPolicyDashboardUseCase:
        """Provide policy dashboard use case."""
        return GetPolicyDashboardUseCase(
            dashboard_service=dashboard_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    # Endorsement use cases
    @provide(scope=Scope.REQUEST)
    def get_endorse_policy_use_case(
        self,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        organization_service: OrganizationService,
        user_service: UserService,
    ) -> EndorsePolicyUseCase:
        """Provide endorse policy use case."""
        return EndorsePolicyUseCase(
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            organization_service=organization_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_endorsement_use_case(
        self,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        organization_service: OrganizationService,
        user_service: UserService,
    ) -> RemoveEndorsementUseCase:
        """Provide remove endorsement use case."""
        return RemoveEndorsementUseCase(
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            organization_service=organization_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_endorsements_use_case(
        self,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
        organization_service: OrganizationService,
    ) -> ListEndorsementsUseCase:
        """Provide list endorsements use case."""
        return ListEndorsementsUseCase(
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            user_service=user_service,
            organization_service=organization_service,
        )

    # Petition use cases
    @provide(scope=Scope.REQUEST)
    def get_sign_petition_use_case(
        self,
        petition_service: PetitionService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> SignPetitionUseCase:
        """Provide sign petition use case."""
        return SignPetitionUseCase(
            petition_service=petition_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_signatures_use_case(
        self, petition_service: PetitionService, policy_service: PolicyService
    ) -> ListSignaturesUseCase:
        """Provide list signatures use case."""
        return ListSignaturesUseCase(
            petition_service=petition_service, policy_service=policy_service
        )

    @provide(scope=Scope.REQUEST)
    def get_verify_signature_use_case(
        self, petition_service: PetitionService
    ) -> VerifySignatureUseCase:
        """Provide verify signature use case."""
        return VerifySignatureUseCase(petition_service=petition_service)

    # Organization use cases
    @provide(scope=Scope.REQUEST)
    def get_create_organization_use_case(
        self,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> CreateOrganizationUseCase:
        """Provide create organization use case."""
        return CreateOrganizationUseCase(
            organization_service=organization_service,
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_organizations_use_case(
        self,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> ListOrganizationsUseCase:
        """Provide list organizations use case."""
        return ListOrganizationsUseCase(
            organization_service=organization_service,
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_organization_use_case(
        self,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> GetOrganizationUseCase:
        """Provide get organization use case."""
        return GetOrganizationUseCase(
            organization_service=organization_service,
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_organization_use_case(
        self,
        organization_service: OrganizationService,
        endorsement_service: EndorsementService,
        policy_service: PolicyService,
        user_service: UserService,
    ) -> UpdateOrganizationUseCase:
        """Provide update organization use case."""
        return UpdateOrganizationUseCase(
            organization_service=organization_service,
            endorsement_service=endorsement_service,
            policy_service=policy_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_members_use_case(
        self, organization_service: OrganizationService, user_service: UserService
    ) -> ListMembersUseCase:
        """Provide list members use case."""
        return ListMembersUseCase(
            organization_service=organization_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_join_organization_use_case(
        self, organization_service: OrganizationService, user_service: UserService
    ) -> JoinOrganizationUseCase:
        """Provide join organization use case."""
        return JoinOrganizationUseCase(
            organization_service=organization_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_member_use_case(
        self, organization_service: OrganizationService, user_service: UserService
    ) -> RemoveMemberUseCase:
        """Provide remove member use case."""
        return RemoveMemberUseCase(
            organization_service=organization_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_request_access_use_case(
        self,
        access_request_service: AccessRequestService,
        user_service: UserService,
    ) -> RequestAccessUseCase:
        """Provide request access use case."""
        return RequestAccessUseCase(
            access_request_service=access_request_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_access_requests_use_case(
        self,
        access_request_service: AccessRequestService,
        user_service: UserService,
    ) -> ListAccessRequestsUseCase:
        """Provide list access requests use case."""
        return ListAccessRequestsUseCase(
            access_request_service=access_request_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_review_access_request_use_case(
        self,
        access_request_service: AccessRequestService,
        user_service: UserService,
    ) -> ReviewAccessRequestUseCase:
        """Provide review access request use case."""
        return ReviewAccessRequestUseCase(
            access_request_service=access_request_service, user_service=user_service
        )

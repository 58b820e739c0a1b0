"""Delete policy use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import PolicyService, UserService
from agora.domain.value import Identity, PolicyId


class DeletePolicyRequest(BaseModel):
    """Delete policy request."""

    policy_id: str  # UUID string
    identity: Identity


class DeletePolicyResponse(BaseModel):
    """Delete policy response."""

    deleted: bool = True


class DeletePolicyUseCase:
    """Use case for soft-deleting one's own policy."""

    def __init__(
        self, policy_service: PolicyService, user_service: UserService
    ) -> None:
        self.policy_service = policy_service
        self.user_service = user_service

    async def execute(self, request: DeletePolicyRequest) -> DeletePolicyResponse:
        """Execute delete policy flow.

        Raises:
            NotFoundError: If the policy is missing or already deleted
            NotAuthorizedError: If the caller isn't the author
        """
        user = await self.user_service.ensure_user(request.identity)
        await self.policy_service.delete_policy(PolicyId(UUID(request.policy_id)), user)
        return DeletePolicyResponse()

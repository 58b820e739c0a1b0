"""Remove member use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import OrganizationService, UserService
from agora.domain.value import Identity, OrganizationId, UserId


class RemoveMemberRequest(BaseModel):
    """Remove member request."""

    organization_id: str  # UUID string
    identity: Identity
    user_id: str | None = None  # Member to remove, defaults to the caller


class RemoveMemberResponse(BaseModel):
    """Remove member response."""

    removed: bool = True


class RemoveMemberUseCase:
    """Use case for leaving an organization or removing a member."""

    def __init__(
        self, organization_service: OrganizationService, user_service: UserService
    ) -> None:
        self.organization_service = organization_service
        self.user_service = user_service

    async def execute(self, request: RemoveMemberRequest) -> RemoveMemberResponse:
        """Execute remove member flow.

        Raises:
            NotFoundError: If the target isn't a member
            NotAuthorizedError: If a non-admin removes someone else
            BusinessRuleViolationError: If the target is the last admin
        """
        actor = await self.user_service.ensure_user(request.identity)
        target_user_id = UserId(UUID(request.user_id)) if request.user_id else None

        await self.organization_service.remove_member(
            OrganizationId(UUID(request.organization_id)),
            actor,
            target_user_id=target_user_id,
        )
        return RemoveMemberResponse()

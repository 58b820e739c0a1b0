"""Join organization use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import OrganizationService, UserService
from agora.domain.value import Identity, OrganizationId

from .list_members import MemberItem


class JoinOrganizationRequest(BaseModel):
    """Join organization request."""

    organization_id: str  # UUID string
    identity: Identity


class JoinOrganizationResponse(BaseModel):
    """Join organization response."""

    member: MemberItem


class JoinOrganizationUseCase:
    """Use case for joining an organization as a regular member."""

    def __init__(
        self, organization_service: OrganizationService, user_service: UserService
    ) -> None:
        self.organization_service = organization_service
        self.user_service = user_service

    async def execute(
        self, request: JoinOrganizationRequest
    ) -> JoinOrganizationResponse:
        """Execute join flow.

        Raises:
            NotFoundError: If the organization doesn't exist
            BusinessRuleViolationError: If the caller is already a member
        """
        user = await self.user_service.ensure_user(request.identity)
        member = await self.organization_service.join(
            OrganizationId(UUID(request.organization_id)), user
        )
        return JoinOrganizationResponse(
            member=MemberItem(
                membership_id=str(member.id),
                user_id=str(user.id),
                name=user.name,
                location=user.location,
                role=member.role,
                joined_at=member.created_at,
            )
        )

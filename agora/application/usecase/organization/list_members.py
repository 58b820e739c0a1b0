"""List members use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import OrganizationService, UserService
from agora.domain.value import MemberRole, OrganizationId


class MemberItem(BaseModel):
    """Organization member in response."""

    membership_id: str
    user_id: str
    name: str | None
    location: str | None
    role: MemberRole
    joined_at: datetime


class ListMembersRequest(BaseModel):
    """List members request."""

    organization_id: str  # UUID string


class ListMembersResponse(BaseModel):
    """List members response."""

    members: list[MemberItem]


class ListMembersUseCase:
    """Use case for listing an organization's members, oldest first."""

    def __init__(
        self, organization_service: OrganizationService, user_service: UserService
    ) -> None:
        self.organization_service = organization_service
        self.user_service = user_service

    async def execute(self, request: ListMembersRequest) -> ListMembersResponse:
        """Execute list members flow.

        Raises:
            NotFoundError: If the organization doesn't exist
        """
        members = await self.organization_service.list_members(
            OrganizationId(UUID(request.organization_id))
        )
        users = await self.user_service.get_many([m.user_id for m in members])

        items = []
        for member in members:
            user = users.get(member.user_id)
            items.append(
                MemberItem(
                    membership_id=str(member.id),
                    user_id=str(member.user_id),
                    name=user.name if user else None,
                    location=user.location if user else None,
                    role=member.role,
                    joined_at=member.created_at,
                )
            )
        return ListMembersResponse(members=items)

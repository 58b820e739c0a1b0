"""List access requests use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.error import ValidationError
from agora.domain.service import AccessRequestService, UserService
from agora.domain.value import AccessRequestStatus, Identity, OrganizationId

from .request_access import AccessRequestItem


class ListAccessRequestsRequest(BaseModel):
    """List access requests request."""

    organization_id: str  # UUID string
    identity: Identity
    status: str = AccessRequestStatus.PENDING.value


class ListAccessRequestsResponse(BaseModel):
    """List access requests response."""

    requests: list[AccessRequestItem]


class ListAccessRequestsUseCase:
    """Use case for admins reviewing who wants to join."""

    def __init__(
        self,
        access_request_service: AccessRequestService,
        user_service: UserService,
    ) -> None:
        self.access_request_service = access_request_service
        self.user_service = user_service

    async def execute(
        self, request: ListAccessRequestsRequest
    ) -> ListAccessRequestsResponse:
        """Execute list access requests flow.

        Requesters' emails are included so admins can recognise them.

        Raises:
            ValidationError: If the status is unknown
            NotAuthorizedError: If the caller is not an admin
        """
        try:
            status = AccessRequestStatus(request.status)
        except ValueError:
            raise ValidationError(f"Invalid status: {request.status}")

        reviewer = await self.user_service.ensure_user(request.identity)
        requests = await self.access_request_service.list_requests(
            OrganizationId(UUID(request.organization_id)), reviewer, status=status
        )
        users = await self.user_service.get_many([r.user_id for r in requests])

        items = []
        for access_request in requests:
            user = users.get(access_request.user_id)
            items.append(
                AccessRequestItem(
                    request_id=str(access_request.id),
                    organization_id=str(access_request.organization_id),
                    user_id=str(access_request.user_id),
                    user_name=user.name if user else None,
                    user_email=user.email if user else None,
                    status=access_request.status,
                    message=access_request.message,
                    created_at=access_request.created_at,
                )
            )
        return ListAccessRequestsResponse(requests=items)

"""Request access use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import AccessRequestService, UserService
from agora.domain.value import AccessRequestStatus, Identity, OrganizationId


class AccessRequestItem(BaseModel):
    """Access request in response."""

    request_id: str
    organization_id: str
    user_id: str
    user_name: str | None = None
    user_email: str | None = None
    status: AccessRequestStatus
    message: str | None
    created_at: datetime


class RequestAccessRequest(BaseModel):
    """Request access request."""

    organization_id: str  # UUID string
    identity: Identity
    message: str | None = None


class RequestAccessResponse(BaseModel):
    """Request access response."""

    request: AccessRequestItem


class RequestAccessUseCase:
    """Use case for asking to join an organization."""

    def __init__(
        self,
        access_request_service: AccessRequestService,
        user_service: UserService,
    ) -> None:
        self.access_request_service = access_request_service
        self.user_service = user_service

    async def execute(self, request: RequestAccessRequest) -> RequestAccessResponse:
        """Execute request access flow.

        Raises:
            NotFoundError: If the organization doesn't exist
            BusinessRuleViolationError: If the caller is already a member or
                already asked
        """
        user = await self.user_service.ensure_user(request.identity)
        access_request = await self.access_request_service.request_access(
            OrganizationId(UUID(request.organization_id)),
            user,
            message=request.message,
        )
        return RequestAccessResponse(
            request=AccessRequestItem(
                request_id=str(access_request.id),
                organization_id=str(access_request.organization_id),
                user_id=str(user.id),
                user_name=user.name,
                status=access_request.status,
                message=access_request.message,
                created_at=access_request.created_at,
            )
        )

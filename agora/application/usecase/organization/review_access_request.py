"""Review access request use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.error import ValidationError
from agora.domain.service import AccessRequestService, UserService
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    Identity,
    OrganizationId,
    ReviewAction,
)


class ReviewAccessRequestRequest(BaseModel):
    """Review access request request."""

    organization_id: str  # UUID string
    identity: Identity
    request_id: str  # UUID string
    action: str  # "approve" or "deny"


class ReviewAccessRequestResponse(BaseModel):
    """Review access request response."""

    success: bool = True
    action: ReviewAction
    status: AccessRequestStatus


class ReviewAccessRequestUseCase:
    """Use case for approving or denying a request to join."""

    def __init__(
        self,
        access_request_service: AccessRequestService,
        user_service: UserService,
    ) -> None:
        self.access_request_service = access_request_service
        self.user_service = user_service

    async def execute(
        self, request: ReviewAccessRequestRequest
    ) -> ReviewAccessRequestResponse:
        """Execute review flow.

        Raises:
            ValidationError: If the action is unknown
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the request isn't one of this organization's
            BusinessRuleViolationError: If the request was already reviewed
        """
        try:
            action = ReviewAction(request.action)
        except ValueError:
            raise ValidationError('Action must be "approve" or "deny".')

        reviewer = await self.user_service.ensure_user(request.identity)
        reviewed = await self.access_request_service.review(
            OrganizationId(UUID(request.organization_id)),
            AccessRequestId(UUID(request.request_id)),
            reviewer,
            action,
        )
        return ReviewAccessRequestResponse(action=action, status=reviewed.status)

"""Access request domain service."""

from uuid import uuid4

import logfire

from agora.domain.error import BusinessRuleViolationError, NotFoundError
from agora.domain.model import AccessRequest, User
from agora.domain.model.common import utc_now
from agora.domain.repository import AccessRequestRepository
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    OrganizationId,
    ReviewAction,
)

from .base import Service
from .organization_service import OrganizationService


class AccessRequestService(Service):
    """Domain service for the request-to-join workflow."""

    def __init__(
        self,
        access_request_repository: AccessRequestRepository,
        organization_service: OrganizationService,
    ) -> None:
        """Initialize access request service.

        Args:
            access_request_repository: Access request repository
            organization_service: Organization service for membership checks
        """
        self.access_request_repository = access_request_repository
        self.organization_service = organization_service

    async def request_access(
        self,
        organization_id: OrganizationId,
        user: User,
        message: str | None = None,
    ) -> AccessRequest:
        """Ask to join an organization.

        A user has at most one request per organization. A denied request can
        be reopened by asking again.

        Raises:
            NotFoundError: If the organization doesn't exist
            BusinessRuleViolationError: If the user is already a member or
                already has a request awaiting review
        """
        with logfire.span(
            "access_request_service.request_access",
            organization_id=str(organization_id),
            user_id=str(user.id),
        ):
            await self.organization_service.get_organization(organization_id)

            if await self.organization_service.get_membership(
                organization_id, user.id
            ):
                raise BusinessRuleViolationError(
                    "You are already a member of this organization."
                )

            message = (message or "").strip() or None
            now = utc_now()
            existing = await self.access_request_repository.find_by_user_and_organization(
                user.id, organization_id
            )
            if existing:
                if existing.status != AccessRequestStatus.DENIED:
                    raise BusinessRuleViolationError(
                        "You have already requested access to this organization."
                    )
                request = existing.model_copy(
                    update={
                        "status": AccessRequestStatus.PENDING,
                        "message": message,
                        "reviewed_by_id": None,
                        "reviewed_at": None,
                        "updated_at": now,
                    }
                )
            else:
                request = AccessRequest(
                    id=AccessRequestId(uuid4()),
                    organization_id=organization_id,
                    user_id=user.id,
                    message=message,
                    created_at=now,
                    updated_at=now,
                )

            saved = await self.access_request_repository.save(request)
            logfire.info(
                "Access requested",
                request_id=str(saved.id),
                organization_id=str(organization_id),
                user_id=str(user.id),
            )
            return saved

    async def list_requests(
        self,
        organization_id: OrganizationId,
        reviewer: User,
        status: AccessRequestStatus = AccessRequestStatus.PENDING,
    ) -> list[AccessRequest]:
        """List an organization's requests with the given status. Admins only.

        Raises:
            NotAuthorizedError: If the reviewer is not an admin
        """
        with logfire.span(
            "access_request_service.list_requests",
            organization_id=str(organization_id),
            status=status.value,
        ):
            await self.organization_service.require_admin(
                organization_id, reviewer, "view access requests of"
            )
            requests = await self.access_request_repository.find_by_organization(
                organization_id, status
            )
            logfire.info("Access requests listed", count=len(requests))
            return requests

    async def review(
        self,
        organization_id: OrganizationId,
        request_id: AccessRequestId,
        reviewer: User,
        action: ReviewAction,
    ) -> AccessRequest:
        """Approve or deny a pending request. Admins only.

        Approval adds the requester as a regular member. Both writes share
        the request's database transaction.

        Raises:
            NotAuthorizedError: If the reviewer is not an admin
            NotFoundError: If the request doesn't belong to the organization
            BusinessRuleViolationError: If the request was already reviewed
        """
        with logfire.span(
            "access_request_service.review",
            organization_id=str(organization_id),
            request_id=str(request_id),
            action=action.value,
        ):
            await self.organization_service.require_admin(
                organization_id, reviewer, "review access requests of"
            )

            request = await self.access_request_repository.find_by_id(request_id)
            if not request or request.organization_id != organization_id:
                raise NotFoundError("Access request", str(request_id))
            if not request.is_pending:
                raise BusinessRuleViolationError(
                    "This request has already been reviewed."
                )

            if action == ReviewAction.APPROVE:
                await self.organization_service.add_member(
                    organization_id, request.user_id
                )
                status = AccessRequestStatus.APPROVED
            else:
                status = AccessRequestStatus.DENIED

            now = utc_now()
            reviewed = await self.access_request_repository.save(
                request.model_copy(
                    update={
                        "status": status,
                        "reviewed_by_id": reviewer.id,
                        "reviewed_at": now,
                        "updated_at": now,
                    }
                )
            )
            logfire.info(
                "Access request reviewed",
                request_id=str(request_id),
                status=status.value,
                reviewer_id=str(reviewer.id),
            )
            return reviewed

"""In-memory access request repository for testing."""

from typing import Optional

from agora.domain.model.access_request import AccessRequest
from agora.domain.repository.access_request import AccessRequestRepository
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    OrganizationId,
    UserId,
)


class InMemoryAccessRequestRepository(AccessRequestRepository):
    """In-memory implementation of AccessRequestRepository for testing."""

    def __init__(self) -> None:
        self._requests: dict[AccessRequestId, AccessRequest] = {}

    async def find_by_id(self, request_id: AccessRequestId) -> Optional[AccessRequest]:
        """Find an access request by ID."""
        return self._requests.get(request_id)

    async def find_by_user_and_organization(
        self, user_id: UserId, organization_id: OrganizationId
    ) -> Optional[AccessRequest]:
        """Find the request a user made to an organization."""
        for request in self._requests.values():
            if request.user_id == user_id and request.organization_id == organization_id:
                return request
        return None

    async def find_by_organization(
        self, organization_id: OrganizationId, status: AccessRequestStatus
    ) -> list[AccessRequest]:
        """List an organization's requests with a status, oldest first."""
        requests = [
            r
            for r in self._requests.values()
            if r.organization_id == organization_id and r.status == status
        ]
        requests.sort(key=lambda r: r.created_at)
        return requests

    async def save(self, access_request: AccessRequest) -> AccessRequest:
        """Save an access request."""
        self._requests[access_request.id] = access_request
        return access_request

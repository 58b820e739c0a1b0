"""Access request repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.access_request import AccessRequest
from agora.domain.value import (
    AccessRequestId,
    AccessRequestStatus,
    OrganizationId,
    UserId,
)


class AccessRequestRepository(ABC):
    """Repository for AccessRequest entity."""

    @abstractmethod
    async def find_by_id(self, request_id: AccessRequestId) -> Optional[AccessRequest]:
        """Find an access request by ID."""
        pass

    @abstractmethod
    async def find_by_user_and_organization(
        self, user_id: UserId, organization_id: OrganizationId
    ) -> Optional[AccessRequest]:
        """Find the (single) request a user made to an organization."""
        pass

    @abstractmethod
    async def find_by_organization(
        self, organization_id: OrganizationId, status: AccessRequestStatus
    ) -> list[AccessRequest]:
        """List an organization's requests with the given status, oldest first."""
        pass

    @abstractmethod
    async def save(self, access_request: AccessRequest) -> AccessRequest:
        """Save an access request (create or update)."""
        pass

"""Domain services."""

from .access_request_service import AccessRequestService
from .base import Service
from .comment_service import CommentService
from .dashboard_service import DashboardService, PolicyDashboard
from .endorsement_service import EndorsementService
from .jwt_service import JWTService
from .organization_service import OrganizationService
from .petition_service import PetitionService
from .policy_service import PolicyService
from .user_service import UserService

__all__ = [
    "AccessRequestService",
    "CommentService",
    "DashboardService",
    "EndorsementService",
    "JWTService",
    "OrganizationService",
    "PetitionService",
    "PolicyDashboard",
    "PolicyService",
    "Service",
    "UserService",
]

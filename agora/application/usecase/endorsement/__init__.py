"""Endorsement use cases."""

from .endorse_policy import (
    EndorsePolicyRequest,
    EndorsePolicyResponse,
    EndorsePolicyUseCase,
)
from .list_endorsements import (
    EndorsementItem,
    ListEndorsementsRequest,
    ListEndorsementsResponse,
    ListEndorsementsUseCase,
)
from .remove_endorsement import RemoveEndorsementRequest, RemoveEndorsementUseCase

__all__ = [
    "EndorsePolicyRequest",
    "EndorsePolicyResponse",
    "EndorsePolicyUseCase",
    "EndorsementItem",
    "ListEndorsementsRequest",
    "ListEndorsementsResponse",
    "ListEndorsementsUseCase",
    "RemoveEndorsementRequest",
    "RemoveEndorsementUseCase",
]

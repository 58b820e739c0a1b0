"""Petition signature entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utc_now
from agora.domain.value import PolicyId, SignatureId, UserId


class PetitionSignature(DomainModel):
    """A user's signature on a policy petition.

    Signatures only count publicly once the signer has confirmed them via
    the emailed ``verification_token``; the token is cleared on
    verification.
    """

    id: SignatureId
    policy_id: PolicyId
    user_id: UserId
    full_name: str = Field(min_length=1, max_length=200)
    location: Optional[str] = None
    email_verified: bool = False
    verification_token: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

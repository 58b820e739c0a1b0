"""Petition use cases."""

from .list_signatures import (
    ListSignaturesRequest,
    ListSignaturesResponse,
    ListSignaturesUseCase,
)
from .sign_petition import (
    SignPetitionRequest,
    SignPetitionResponse,
    SignPetitionUseCase,
)
from .verify_signature import (
    VerifySignatureRequest,
    VerifySignatureResponse,
    VerifySignatureUseCase,
)

__all__ = [
    "ListSignaturesRequest",
    "ListSignaturesResponse",
    "ListSignaturesUseCase",
    "SignPetitionRequest",
    "SignPetitionResponse",
    "SignPetitionUseCase",
    "VerifySignatureRequest",
    "VerifySignatureResponse",
    "VerifySignatureUseCase",
]

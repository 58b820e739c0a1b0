"""Translation of domain errors into HTTP responses."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from fastapi import HTTPException, status

from agora.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.domain.service import JWTService
from agora.domain.value import Identity


def require_identity(
    jwt_service: JWTService, auth_token: str | None, detail: str
) -> Identity:
    """Resolve the caller from the session cookie or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        detail: Message returned to unauthenticated callers

    Raises:
        HTTPException: If the token is missing, invalid or expired
    """
    identity = jwt_service.get_identity_from_token(auth_token)
    if not identity:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
    return identity


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Map domain errors raised inside the block to HTTP errors.

    NotFound -> 404, NotAuthorized -> 403, validation and business rule
    errors (and malformed identifiers) -> 400. Anything else is logged and
    reported as a generic 500.

    Args:
        action: What the request was doing, used in logs and the 500 detail
    """
    try:
        yield
    except HTTPException:
        raise
    except NotFoundError as e:
        logfire.warn(f"Failed to {action} - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn(f"Unauthorized attempt to {action}", error=str(e))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except (ValidationError, BusinessRuleViolationError, ValueError) as e:
        logfire.warn(f"Failed to {action} - invalid request", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error(f"Unexpected error trying to {action}", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        )

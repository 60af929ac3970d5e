"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers to work out who is
making the request. Resolution is split in two:

1. get_current_identity — "soft": reads the bearer token, never fails.
   A missing or bad token just yields an anonymous identity, so read
   endpoints keep working.
2. require_identity(operation) — "hard": rejects anonymous callers with
   403, but only for operations listed in settings.protected_operations.
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, HTTPException

from restboard.auth.jwt import TokenError, verify_token
from restboard.config import settings
from restboard.store.models import User

logger = structlog.get_logger()


class CurrentIdentity:
    """Represents the acting identity for one request.

    Learn: either anonymous (user is None) or authenticated as a user.
    When a token was presented but failed verification, `error` holds
    the failure kind ("expired", "bad_signature", "malformed").
    """

    def __init__(self, user: Optional[User] = None, error: Optional[str] = None):
        self.user = user
        self.error = error

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


def get_current_identity(
    authorization: Optional[str] = Header(None),
) -> CurrentIdentity:
    """Derive the acting identity from the Authorization header."""
    if not authorization or not authorization.startswith("Bearer "):
        return CurrentIdentity()

    token = authorization[7:]
    try:
        return CurrentIdentity(user=verify_token(token))
    except TokenError as e:
        logger.info("auth.token_rejected", kind=e.kind, reason=str(e))
        return CurrentIdentity(error=e.kind)


def require_identity(operation: str):
    """Build a dependency that enforces auth when `operation` is protected.

    The policy is read per request, so changing settings.protected_operations
    takes effect without rebuilding the app.
    """

    def dependency(
        identity: CurrentIdentity = Depends(get_current_identity),
    ) -> CurrentIdentity:
        if operation in settings.protected_operations and not identity.is_authenticated:
            logger.info(
                "auth.forbidden",
                operation=operation,
                reason=identity.error or "missing_token",
            )
            raise HTTPException(
                status_code=403,
                detail="Not authorized",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return identity

    return dependency


def get_current_user(
    identity: CurrentIdentity = Depends(get_current_identity),
) -> User:
    """Always require a valid token. Used by endpoints about the caller."""
    if not identity.is_authenticated:
        raise HTTPException(
            status_code=403,
            detail="Not authorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity.user

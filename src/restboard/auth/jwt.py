"""JWT session token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication.
The session token is deliberately short-lived (30s by default) and
there is no refresh; clients simply ask GET /session for a new one.

The token carries the user id (sub) and username so the verifier can
hand back the subject without touching the store.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from restboard.config import settings
from restboard.store.models import User


class TokenError(Exception):
    """Raised when token verification fails."""

    kind = "invalid"


class TokenExpiredError(TokenError):
    kind = "expired"


class TokenSignatureError(TokenError):
    kind = "bad_signature"


class TokenMalformedError(TokenError):
    kind = "malformed"


def create_session_token(
    user: User,
    expires_seconds: Optional[int] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    """Sign a session token for a user."""
    now = issued_at or datetime.now(timezone.utc)
    ttl = settings.token_expire_seconds if expires_seconds is None else expires_seconds
    payload = {
        "sub": user.id,
        "username": user.username,
        "iat": now,
        "exp": now + timedelta(seconds=ttl),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> User:
    """Verify a session token and return its subject.

    Raises a TokenError subclass on failure (expired, bad signature
    or malformed) so callers can tell the cases apart in logs.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Token has expired")
    # InvalidSignatureError subclasses DecodeError, so it goes first
    except jwt.InvalidSignatureError:
        raise TokenSignatureError("Token signature does not match")
    except jwt.InvalidTokenError as e:
        raise TokenMalformedError(f"Invalid token: {e}")

    username = payload.get("username")
    if not isinstance(payload["sub"], str) or not isinstance(username, str):
        raise TokenMalformedError("Invalid token: subject claims missing")
    return User(id=payload["sub"], username=username)

"""Session API — mint and inspect short-lived bearer tokens.

Learn: There is no login. GET /session signs a token for the configured
session user (settings.session_user_id), standing in for whoever is
"logged in". Tokens expire after settings.token_expire_seconds and are
never refreshed. Ask again for a new one.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from restboard.auth.dependencies import get_current_user
from restboard.auth.jwt import create_session_token
from restboard.config import settings
from restboard.schemas.session import SessionToken
from restboard.schemas.user import UserRead
from restboard.services.user_service import UserService
from restboard.store.memory import InMemoryStore, NotFoundError, get_store
from restboard.store.models import User

logger = structlog.get_logger()

router = APIRouter(prefix="/session")


@router.get("", response_model=SessionToken)
async def issue_session(store: InMemoryStore = Depends(get_store)):
    """Sign a session token for the current session user."""
    try:
        user = UserService(store).get_user(settings.session_user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    token = create_session_token(user)
    logger.info(
        "auth.token_issued",
        user_id=user.id,
        expires_in=settings.token_expire_seconds,
    )
    return SessionToken(token=token)


@router.get("/me", response_model=UserRead)
async def get_me(user: User = Depends(get_current_user)):
    """Return the user the bearer token was issued for."""
    return user

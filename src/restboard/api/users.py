"""Users API — read-only listing and lookup.

Learn: Routes:
- GET /users → all users, in seed order
- GET /users/:id → one user (404 if absent)
"""

from fastapi import APIRouter, Depends, HTTPException

from restboard.schemas.user import UserRead
from restboard.services.user_service import UserService
from restboard.store.memory import InMemoryStore, NotFoundError, get_store

router = APIRouter(prefix="/users")


def _svc(store: InMemoryStore = Depends(get_store)) -> UserService:
    return UserService(store)


@router.get("", response_model=list[UserRead])
async def list_users(svc: UserService = Depends(_svc)):
    """List every user."""
    return svc.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, svc: UserService = Depends(_svc)):
    """Get a single user by id."""
    try:
        return svc.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

"""Messages API — CRUD on the in-memory message collection.

Learn: Routes:
- GET /messages → all messages
- GET /messages/:id → one message
- POST /messages → create (bearer token required by default)
- PUT /messages/:id → replace the text
- DELETE /messages/:id → remove, returning the removed message

Which writes need a token is decided per operation by
settings.protected_operations, not hard-coded here.
"""

from fastapi import APIRouter, Depends, HTTPException

from restboard.auth.dependencies import CurrentIdentity, require_identity
from restboard.schemas.message import MessageCreate, MessageRead, MessageUpdate
from restboard.services.message_service import MessageService
from restboard.store.memory import InMemoryStore, NotFoundError, get_store

router = APIRouter(prefix="/messages")


def _svc(store: InMemoryStore = Depends(get_store)) -> MessageService:
    return MessageService(store)


# ─── Reads ──────────────────────────────────────────────


@router.get("", response_model=list[MessageRead])
async def list_messages(svc: MessageService = Depends(_svc)):
    """List every message, oldest first."""
    return svc.list_messages()


@router.get("/{message_id}", response_model=MessageRead)
async def get_message(message_id: str, svc: MessageService = Depends(_svc)):
    """Get a single message by id."""
    try:
        return svc.get_message(message_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ─── Writes ─────────────────────────────────────────────


@router.post("", response_model=MessageRead)
async def create_message(
    body: MessageCreate,
    identity: CurrentIdentity = Depends(require_identity("create_message")),
    svc: MessageService = Depends(_svc),
):
    """Create a message authored by the token's user."""
    return svc.create_message(body.text, author=identity.user)


@router.put("/{message_id}", response_model=MessageRead)
async def update_message(
    message_id: str,
    body: MessageUpdate,
    identity: CurrentIdentity = Depends(require_identity("update_message")),
    svc: MessageService = Depends(_svc),
):
    """Replace a message's text."""
    try:
        return svc.update_text(message_id, body.text)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{message_id}", response_model=MessageRead)
async def delete_message(
    message_id: str,
    identity: CurrentIdentity = Depends(require_identity("delete_message")),
    svc: MessageService = Depends(_svc),
):
    """Delete a message and return it."""
    try:
        return svc.delete_message(message_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

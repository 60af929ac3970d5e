"""Health check endpoint.

Learn: Simple GET endpoint that verifies the server is running and
reports how many records the store currently holds.
"""

from fastapi import APIRouter, Depends

from restboard import __version__
from restboard.store.memory import InMemoryStore, get_store

router = APIRouter()


@router.get("/health")
async def health_check(store: InMemoryStore = Depends(get_store)):
    """Check server health and store size."""
    return {
        "status": "healthy",
        "server": "ok",
        "version": __version__,
        "users": store.count("users"),
        "messages": store.count("messages"),
    }

"""In-memory storage for users and messages.

Learn: the store is an injected object, not module-level dicts. The app
factory hangs one instance off app.state and routes reach it through the
get_store dependency, so tests (or a real database later) can swap it out.
"""

from restboard.store.memory import InMemoryStore, NotFoundError, get_store, seed_store
from restboard.store.models import Message, User

__all__ = [
    "InMemoryStore",
    "Message",
    "NotFoundError",
    "User",
    "get_store",
    "seed_store",
]

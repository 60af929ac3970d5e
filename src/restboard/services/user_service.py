"""User service — read-only access to the seeded users."""

from restboard.store.memory import InMemoryStore
from restboard.store.models import User


class UserService:
    """Business logic for users. Users are seeded at startup and never change."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def list_users(self) -> list[User]:
        return self.store.list("users")

    def get_user(self, user_id: str) -> User:
        """Raises NotFoundError if the user doesn't exist."""
        return self.store.get("users", user_id)

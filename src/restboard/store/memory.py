"""Thread-safe in-memory keyed store.

Learn: one insertion-ordered dict per resource kind ("users", "messages"),
keyed by record id. Every operation holds a single re-entrant lock:
FastAPI runs sync dependencies in a threadpool, so reads must never
observe a half-applied write. Invariant: for every entry, key == record.id.

Nothing here survives a restart.
"""

import threading
import uuid
from dataclasses import fields, replace
from typing import Any, Iterable, Optional

from starlette.requests import Request

from restboard.store.models import Message, User

KINDS = ("users", "messages")


class NotFoundError(Exception):
    """Raised when a record id is absent from its collection."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind[:-1].capitalize()} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class InMemoryStore:
    """Keyed collections of records, shared by every request in the process."""

    def __init__(self, kinds: Iterable[str] = KINDS):
        self._lock = threading.RLock()
        self._data: dict[str, dict[str, Any]] = {kind: {} for kind in kinds}

    def _collection(self, kind: str) -> dict[str, Any]:
        try:
            return self._data[kind]
        except KeyError:
            raise KeyError(f"Unknown resource kind: {kind}") from None

    def list(self, kind: str) -> list:
        """All records of a kind, in insertion order."""
        with self._lock:
            return list(self._collection(kind).values())

    def get(self, kind: str, record_id: str):
        with self._lock:
            record = self._collection(kind).get(record_id)
            if record is None:
                raise NotFoundError(kind, record_id)
            return record

    def create(self, kind: str, record):
        """Store a record, assigning a random UUID id when it has none."""
        with self._lock:
            collection = self._collection(kind)
            if record.id is None:
                record = replace(record, id=str(uuid.uuid4()))
            collection[record.id] = record
            return record

    def update(self, kind: str, record_id: str, patch: dict[str, Any]):
        """Apply a field patch in place. The id itself can't be patched."""
        with self._lock:
            record = self.get(kind, record_id)
            allowed = {f.name for f in fields(record)} - {"id"}
            bad = set(patch) - allowed
            if bad:
                raise ValueError(
                    f"Cannot patch field(s) on {kind}: {', '.join(sorted(bad))}"
                )
            for name, value in patch.items():
                setattr(record, name, value)
            return record

    def delete(self, kind: str, record_id: str):
        """Remove a record and return it."""
        with self._lock:
            collection = self._collection(kind)
            if record_id not in collection:
                raise NotFoundError(kind, record_id)
            return collection.pop(record_id)

    def count(self, kind: str) -> int:
        with self._lock:
            return len(self._collection(kind))


def seed_store(store: Optional[InMemoryStore] = None) -> InMemoryStore:
    """Populate a store with the two sample users and their first messages."""
    store = store or InMemoryStore()
    store.create("users", User(id="1", username="Robin Wieruch"))
    store.create("users", User(id="2", username="Dave Davids"))
    store.create("messages", Message(id="1", text="Hello World", user_id="1"))
    store.create("messages", Message(id="2", text="By World", user_id="2"))
    return store


def get_store(request: Request) -> InMemoryStore:
    """FastAPI dependency — the process-wide store attached by create_app()."""
    return request.app.state.store

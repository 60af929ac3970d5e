"""Record types held by the store.

Learn: plain dataclasses play the role ORM models would play with a real
database. API schemas read them with from_attributes=True, so the wire
format (userId) stays separate from the Python attribute names (user_id).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    id: str
    username: str


@dataclass
class Message:
    text: str
    user_id: str
    id: Optional[str] = None  # assigned by the store on create

"""Pydantic schemas for session tokens."""

from pydantic import BaseModel


class SessionToken(BaseModel):
    token: str

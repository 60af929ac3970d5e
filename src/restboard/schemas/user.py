"""Pydantic schemas for users."""

from pydantic import BaseModel


class UserRead(BaseModel):
    id: str
    username: str

    model_config = {"from_attributes": True}

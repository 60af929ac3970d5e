"""Pydantic schemas for messages.

Learn: the wire format uses camelCase "userId" while the record type
uses snake_case user_id. serialization_alias handles the rename on the
way out; FastAPI serializes response models by alias by default.
"""

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    text: str


class MessageUpdate(BaseModel):
    text: str


class MessageRead(BaseModel):
    id: str
    text: str
    user_id: str = Field(serialization_alias="userId")

    model_config = {"from_attributes": True}

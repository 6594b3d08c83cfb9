# eventhub/schemas/topic.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from .slot import SlotWithEvent


class TopicBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    instructor: str = Field(..., min_length=1, max_length=150)
    max_participants: Optional[int] = Field(None, ge=1)
    slot_id: int


class TopicCreate(TopicBase):
    pass


class TopicUpdate(TopicBase):
    pass


class TopicRead(BaseModel):
    id: int
    title: str
    description: str
    instructor: str
    max_participants: int
    slot_id: int
    created_at: datetime
    registration_count: int = 0
    is_full: bool = False
    api_url: str

    class Config:
        from_attributes = True


class TopicWithSlot(TopicRead):
    slot: SlotWithEvent

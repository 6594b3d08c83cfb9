# eventhub/schemas/slot.py
from pydantic import BaseModel, Field
from datetime import datetime

from .event import EventRead


class SlotBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    date: str = Field(..., min_length=1, max_length=50)
    time: str = Field(..., min_length=1, max_length=50)


class SlotCreate(SlotBase):
    event_id: int


# Moving a slot to another event is not supported
class SlotUpdate(SlotBase):
    pass


class SlotRead(SlotBase):
    id: int
    event_id: int
    created_at: datetime
    registration_count: int = 0
    api_url: str

    class Config:
        from_attributes = True


class SlotWithEvent(SlotRead):
    event: EventRead

# eventhub/schemas/event.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class EventBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None


class EventCreate(EventBase):
    is_active: bool = True


class EventUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class EventRead(EventBase):
    id: int
    uuid: str
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    url: str
    api_url: str

    class Config:
        from_attributes = True

# eventhub/schemas/registration.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime

from .slot import SlotWithEvent
from .topic import TopicRead


class RegistrationCreate(BaseModel):
    email: EmailStr
    name: Optional[str] = Field(None, max_length=150)
    organization: Optional[str] = Field(None, max_length=150)
    slot_id: int
    topic_id: int


class RegistrationBrief(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    organization: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class RegistrationRead(RegistrationBrief):
    slot_id: int
    topic_id: int
    api_url: str
    slot: SlotWithEvent
    topic: TopicRead


# Confirmation email sent after the attendee submits or edits their choices
class SummaryItem(BaseModel):
    event: str
    slot: str
    topic: str
    date: Optional[str] = None
    time: Optional[str] = None


class SummaryRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    registrations: List[SummaryItem]
    is_update: bool = False

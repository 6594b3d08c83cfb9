# eventhub/models/event.py
import uuid
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.orm import relationship

from eventhub.database import Base
from eventhub.urls import get_api_url, get_event_url


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(36), unique=True, index=True, nullable=False, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    slots = relationship(
        "Slot",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="Slot.id",
    )

    @property
    def url(self):
        return get_event_url(self.uuid)

    @property
    def api_url(self):
        return get_api_url(f"events/{self.id}")

# eventhub/models/topic.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from eventhub.database import Base
from eventhub.urls import get_api_url

DEFAULT_MAX_PARTICIPANTS = 15


class Topic(Base):
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    instructor = Column(String(150), nullable=False)
    max_participants = Column(Integer, nullable=False, default=DEFAULT_MAX_PARTICIPANTS)
    slot_id = Column(Integer, ForeignKey("slots.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    slot = relationship("Slot", back_populates="topics")
    registrations = relationship("Registration", back_populates="topic", cascade="all, delete-orphan")

    @property
    def registration_count(self):
        return len(self.registrations)

    @property
    def is_full(self):
        return self.registration_count >= self.max_participants

    @property
    def api_url(self):
        return get_api_url(f"topics/{self.id}")

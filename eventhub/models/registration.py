# eventhub/models/registration.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from eventhub.database import Base
from eventhub.urls import get_api_url


class Registration(Base):
    __tablename__ = "registrations"

    # (email, slot_id) is kept unique by the registration route, not by the schema
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    name = Column(String(150), nullable=True)
    organization = Column(String(150), nullable=True)
    slot_id = Column(Integer, ForeignKey("slots.id", ondelete="CASCADE"), nullable=False, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    slot = relationship("Slot", back_populates="registrations")
    topic = relationship("Topic", back_populates="registrations")

    @property
    def api_url(self):
        return get_api_url(f"registrations/{self.id}")

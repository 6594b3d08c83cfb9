# eventhub/models/slot.py
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from eventhub.database import Base
from eventhub.urls import get_api_url


class Slot(Base):
    __tablename__ = "slots"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    date = Column(String(50), nullable=False)
    time = Column(String(50), nullable=False)  # time range, e.g. "09:00 - 10:20"
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    event = relationship("Event", back_populates="slots")
    topics = relationship(
        "Topic",
        back_populates="slot",
        cascade="all, delete-orphan",
        order_by="Topic.id",
    )
    registrations = relationship("Registration", back_populates="slot", cascade="all, delete-orphan")

    @property
    def registration_count(self):
        return len(self.registrations)

    @property
    def api_url(self):
        return get_api_url(f"slots/{self.id}")

# eventhub/routes/workshop_data_fastapi.py

from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload

from eventhub.database import get_db
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic
from eventhub.schemas.workshop import SlotWithTopics

router = APIRouter(
    tags=["Workshop data"],
)


@router.get("", response_model=List[SlotWithTopics])
def get_workshop_data(event_id: Optional[int] = None, db: Session = Depends(get_db)):
    """
    Slots with their topics and current occupancy, used by the registration
    form and the live occupancy table.
    """
    query = db.query(Slot).options(
        joinedload(Slot.topics).joinedload(Topic.registrations),
        joinedload(Slot.registrations),
    )
    if event_id is not None:
        query = query.filter(Slot.event_id == event_id)
    return query.order_by(Slot.created_at, Slot.id).all()

# -*- coding: utf-8 -*-
"""
FastAPI routes for Event CRUD.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from eventhub.database import get_db
from eventhub.models.event import Event
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic
from eventhub.schemas.event import EventCreate, EventUpdate
from eventhub.schemas.workshop import EventDetail, EventWithSlots

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Events"],
    responses={404: {"description": "Event not found"}},
)


def _get_event_or_404(db: Session, event_id: int) -> Event:
    db_event = db.query(Event).filter(Event.id == event_id).first()
    if db_event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return db_event


@router.get("", response_model=List[EventWithSlots])
def read_events(active: Optional[bool] = None, db: Session = Depends(get_db)):
    """
    Lists events, newest first, with their slots and topic occupancy.
    """
    query = db.query(Event).options(
        joinedload(Event.slots).joinedload(Slot.topics).joinedload(Topic.registrations)
    )
    if active is not None:
        query = query.filter(Event.is_active == active)
    return query.order_by(Event.created_at.desc(), Event.id.desc()).all()


@router.post("", response_model=EventWithSlots, status_code=status.HTTP_201_CREATED)
def create_event(event: EventCreate, db: Session = Depends(get_db)):
    db_event = Event(**event.model_dump())
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    logger.info(f"Event {db_event.id} created ({db_event.name})")
    return db_event


@router.get("/{event_ref}", response_model=EventDetail)
def read_event(event_ref: str, db: Session = Depends(get_db)):
    """
    Fetches an event by its numeric id or by its public uuid, including
    every topic's registrations.
    """
    condition = Event.uuid == event_ref
    if event_ref.isdigit():
        condition = or_(Event.uuid == event_ref, Event.id == int(event_ref))

    db_event = db.query(Event).options(
        joinedload(Event.slots).joinedload(Slot.topics).joinedload(Topic.registrations)
    ).filter(condition).first()
    if db_event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return db_event


@router.put("/{event_id}", response_model=EventWithSlots)
def update_event(event_id: int, event: EventUpdate, db: Session = Depends(get_db)):
    db_event = _get_event_or_404(db, event_id)

    update_data = event.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        # name and is_active are not nullable; an explicit null leaves them as is
        if value is None and key != "description":
            continue
        setattr(db_event, key, value)

    db.commit()
    db.refresh(db_event)
    return db_event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    """
    Deletes an event together with its slots, topics and registrations.
    """
    db_event = _get_event_or_404(db, event_id)
    db.delete(db_event)
    db.commit()
    logger.info(f"Event {event_id} deleted")
    return None

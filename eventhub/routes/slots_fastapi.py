# -*- coding: utf-8 -*-
"""
FastAPI routes for Slot CRUD.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from eventhub.database import get_db
from eventhub.models.event import Event
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic
from eventhub.schemas.slot import SlotCreate, SlotUpdate
from eventhub.schemas.workshop import SlotWithTopicsAndEvent

router = APIRouter(
    tags=["Slots"],
    responses={404: {"description": "Slot not found"}},
)


def _load_slot(db: Session, slot_id: int) -> Slot:
    db_slot = db.query(Slot).options(
        joinedload(Slot.event),
        joinedload(Slot.topics).joinedload(Topic.registrations),
    ).filter(Slot.id == slot_id).first()
    if db_slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    return db_slot


@router.get("", response_model=List[SlotWithTopicsAndEvent])
def read_slots(event_id: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(Slot).options(
        joinedload(Slot.event),
        joinedload(Slot.topics).joinedload(Topic.registrations),
    )
    if event_id is not None:
        query = query.filter(Slot.event_id == event_id)
    return query.order_by(Slot.created_at, Slot.id).all()


@router.post("", response_model=SlotWithTopicsAndEvent, status_code=status.HTTP_201_CREATED)
def create_slot(slot: SlotCreate, db: Session = Depends(get_db)):
    if db.query(Event).filter(Event.id == slot.event_id).first() is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")

    db_slot = Slot(**slot.model_dump())
    db.add(db_slot)
    db.commit()
    return _load_slot(db, db_slot.id)


@router.get("/{slot_id}", response_model=SlotWithTopicsAndEvent)
def read_slot(slot_id: int, db: Session = Depends(get_db)):
    return _load_slot(db, slot_id)


@router.put("/{slot_id}", response_model=SlotWithTopicsAndEvent)
def update_slot(slot_id: int, slot: SlotUpdate, db: Session = Depends(get_db)):
    db_slot = _load_slot(db, slot_id)

    for key, value in slot.model_dump().items():
        setattr(db_slot, key, value)

    db.commit()
    return _load_slot(db, slot_id)


@router.delete("/{slot_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_slot(slot_id: int, db: Session = Depends(get_db)):
    db_slot = db.query(Slot).filter(Slot.id == slot_id).first()
    if db_slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")
    db.delete(db_slot)
    db.commit()
    return None

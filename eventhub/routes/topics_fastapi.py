# -*- coding: utf-8 -*-
"""
FastAPI routes for Topic CRUD.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from eventhub.database import get_db
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic, DEFAULT_MAX_PARTICIPANTS
from eventhub.schemas.topic import TopicCreate, TopicUpdate, TopicWithSlot

router = APIRouter(
    tags=["Topics"],
    responses={404: {"description": "Topic not found"}},
)


def _load_topic(db: Session, topic_id: int) -> Topic:
    db_topic = db.query(Topic).options(
        joinedload(Topic.slot).joinedload(Slot.event),
        joinedload(Topic.registrations),
    ).filter(Topic.id == topic_id).first()
    if db_topic is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")
    return db_topic


def _check_slot(db: Session, slot_id: int):
    if db.query(Slot).filter(Slot.id == slot_id).first() is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")


@router.get("", response_model=List[TopicWithSlot])
def read_topics(event_id: Optional[int] = None, db: Session = Depends(get_db)):
    """
    Lists topics in creation order, optionally only those of one event.
    """
    query = db.query(Topic).options(
        joinedload(Topic.slot).joinedload(Slot.event),
        joinedload(Topic.registrations),
    )
    if event_id is not None:
        query = query.join(Topic.slot).filter(Slot.event_id == event_id)
    return query.order_by(Topic.created_at, Topic.id).all()


@router.post("", response_model=TopicWithSlot, status_code=status.HTTP_201_CREATED)
def create_topic(topic: TopicCreate, db: Session = Depends(get_db)):
    _check_slot(db, topic.slot_id)

    data = topic.model_dump()
    data["max_participants"] = data["max_participants"] or DEFAULT_MAX_PARTICIPANTS
    db_topic = Topic(**data)
    db.add(db_topic)
    db.commit()
    return _load_topic(db, db_topic.id)


@router.get("/{topic_id}", response_model=TopicWithSlot)
def read_topic(topic_id: int, db: Session = Depends(get_db)):
    return _load_topic(db, topic_id)


@router.put("/{topic_id}", response_model=TopicWithSlot)
def update_topic(topic_id: int, topic: TopicUpdate, db: Session = Depends(get_db)):
    db_topic = _load_topic(db, topic_id)
    _check_slot(db, topic.slot_id)

    data = topic.model_dump()
    data["max_participants"] = data["max_participants"] or DEFAULT_MAX_PARTICIPANTS
    for key, value in data.items():
        setattr(db_topic, key, value)

    db.commit()
    return _load_topic(db, topic_id)


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_topic(topic_id: int, db: Session = Depends(get_db)):
    db_topic = db.query(Topic).filter(Topic.id == topic_id).first()
    if db_topic is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")
    db.delete(db_topic)
    db.commit()
    return None

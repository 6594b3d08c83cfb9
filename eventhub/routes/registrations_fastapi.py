# -*- coding: utf-8 -*-
"""
FastAPI routes for attendee registrations.
"""
import logging
from typing import List, Optional
from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from eventhub.database import get_db
from eventhub.mailer import send_summary_mail
from eventhub.models.registration import Registration
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic
from eventhub.schemas.registration import RegistrationCreate, RegistrationRead, SummaryRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Registrations"],
    responses={404: {"description": "Registration not found"}},
)


def _registration_query(db: Session):
    return db.query(Registration).options(
        joinedload(Registration.slot).joinedload(Slot.event),
        joinedload(Registration.topic).joinedload(Topic.registrations),
    )


def _normalize_email(email: str) -> str:
    """Normalizes an address the way stored registrations were (domain lowercased)."""
    email = email.strip()
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return email


@router.get("", response_model=List[RegistrationRead])
def read_registrations(
    email: Optional[str] = None,
    event_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """
    Lists registrations, newest first, optionally for one email and/or one event.
    """
    query = _registration_query(db)
    if email:
        query = query.filter(Registration.email == _normalize_email(email))
    if event_id is not None:
        query = query.join(Registration.slot).filter(Slot.event_id == event_id)
    return query.order_by(Registration.created_at.desc(), Registration.id.desc()).all()


@router.post("", response_model=RegistrationRead, status_code=status.HTTP_201_CREATED)
def create_registration(registration: RegistrationCreate, db: Session = Depends(get_db)):
    """
    Registers an email for a topic of a slot.

    A second submission for the same (email, slot) moves the existing
    registration to the new topic instead of adding a row. The capacity
    check and the write are not atomic: concurrent submissions can overbook
    a topic.
    """
    db_slot = db.query(Slot).filter(Slot.id == registration.slot_id).first()
    if db_slot is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slot not found")

    db_topic = db.query(Topic).filter(Topic.id == registration.topic_id).first()
    if db_topic is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")

    if db_topic.slot_id != db_slot.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic does not belong to slot")

    if db_topic.registration_count >= db_topic.max_participants:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Topic is full")

    existing = db.query(Registration).filter(
        Registration.email == registration.email,
        Registration.slot_id == registration.slot_id,
    ).first()

    try:
        if existing:
            existing.topic_id = registration.topic_id
            db_registration = existing
        else:
            data = registration.model_dump()
            data['name'] = data['name'] or None
            data['organization'] = data['organization'] or None
            db_registration = Registration(**data)
            db.add(db_registration)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving registration for {registration.email}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create/update registration"
        )

    action = "updated" if existing else "created"
    logger.info(f"Registration {db_registration.id} {action}: {registration.email} -> topic {registration.topic_id}")

    # the topic's registration list changed; reload it for the response counts
    db.expire_all()
    return _registration_query(db).filter(Registration.id == db_registration.id).first()


@router.post("/summary", status_code=status.HTTP_202_ACCEPTED)
def send_registration_summary(summary: SummaryRequest, background_tasks: BackgroundTasks):
    """
    Queues the summary email for an attendee's registrations. The email is
    sent after the response; a failed send is only logged.
    """
    registrations = [item.model_dump() for item in summary.registrations]
    background_tasks.add_task(
        send_summary_mail,
        summary.email,
        summary.name,
        registrations,
        summary.is_update,
    )
    return {"success": True}


@router.get("/{registration_id}", response_model=RegistrationRead)
def read_registration(registration_id: int, db: Session = Depends(get_db)):
    db_registration = _registration_query(db).filter(Registration.id == registration_id).first()
    if db_registration is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")
    return db_registration


@router.delete("/{registration_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_registration(registration_id: int, db: Session = Depends(get_db)):
    db_registration = db.query(Registration).filter(Registration.id == registration_id).first()
    if db_registration is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")

    db.delete(db_registration)
    db.commit()
    logger.info(f"Registration {registration_id} deleted")
    return None

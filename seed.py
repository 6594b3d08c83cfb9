"""
Seeds the database with a sample workshop: one event, three slots and six
topics per slot.

    python seed.py
"""
import logging

from eventhub.database import SessionLocal, engine, Base
from eventhub.models.event import Event
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic
from eventhub.models.registration import Registration  # noqa: F401

logger = logging.getLogger(__name__)

SLOTS = [
    ("Morning Session", "2024-01-15", "09:00 - 10:20"),
    ("Mid-Morning Session", "2024-01-15", "10:40 - 12:00"),
    ("Afternoon Session", "2024-01-15", "12:00 - 13:20"),
]

TOPICS = [
    ("Imaging", "Cardiac imaging techniques and applications", "Wojciech Kosmala"),
    ("Interventional Cardiology", "Interventional procedures and techniques", "Krzysztof Reczuch"),
    ("Intensive Care", "Critical care cardiology and management", "Robert Zymliński"),
    ("Heart Transplantation and Mechanical Circulatory Support",
     "Advanced heart failure and transplant procedures", "Michał Zakliczyński"),
    ("Electrophysiology", "Cardiac rhythm disorders and electrophysiology", "Krzysztof Nowak"),
    ('"One-day" Cardiology Care', "Outpatient cardiology services and management",
     "Małgorzata Kobusiak-Prokopowicz"),
]


def seed(db, max_participants=15):
    event = Event(
        name="Cardiology Workshop 2024",
        description="Annual cardiology workshop with various sessions",
        is_active=True,
    )
    for name, date, time in SLOTS:
        slot = Slot(name=name, date=date, time=time)
        for title, description, instructor in TOPICS:
            slot.topics.append(Topic(
                title=f"{title} ({instructor})",
                description=description,
                instructor=instructor,
                max_participants=max_participants,
            ))
        event.slots.append(slot)
    db.add(event)
    db.commit()
    return event


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        event = seed(db)
        logger.info(f"Seeded event {event.id} ({event.uuid}) with {len(SLOTS)} slots")
    except Exception as e:
        logger.error(f"Error seeding database: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    main()

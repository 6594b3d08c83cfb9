# tests/conftest.py

import os

# the application must not touch the default database file while testing
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RESEND_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from eventhub.database import Base, get_db

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sent_mails(monkeypatch):
    """Captures summary emails instead of calling Resend."""
    sent = []

    def fake_send_mail(to, subject, html_body):
        sent.append({"to": to, "subject": subject, "html": html_body})

    monkeypatch.setattr("eventhub.mailer.send_mail", fake_send_mail)
    return sent


@pytest.fixture
def workshop(client):
    """One event with two slots; the first slot has two topics of capacity 2."""
    event = client.post("/api/v1/events", json={"name": "Cardiology Workshop", "description": "Annual"}).json()
    slot1 = client.post("/api/v1/slots", json={
        "name": "Morning Session", "date": "2024-01-15", "time": "09:00 - 10:20", "event_id": event["id"],
    }).json()
    slot2 = client.post("/api/v1/slots", json={
        "name": "Afternoon Session", "date": "2024-01-15", "time": "12:00 - 13:20", "event_id": event["id"],
    }).json()
    imaging = client.post("/api/v1/topics", json={
        "title": "Imaging", "description": "Cardiac imaging", "instructor": "W. Kosmala",
        "max_participants": 2, "slot_id": slot1["id"],
    }).json()
    intensive = client.post("/api/v1/topics", json={
        "title": "Intensive Care", "description": "Critical care", "instructor": "R. Zymlinski",
        "max_participants": 2, "slot_id": slot1["id"],
    }).json()
    electro = client.post("/api/v1/topics", json={
        "title": "Electrophysiology", "description": "Rhythm disorders", "instructor": "K. Nowak",
        "slot_id": slot2["id"],
    }).json()
    return {
        "event": event,
        "slots": [slot1, slot2],
        "topics": {"imaging": imaging, "intensive": intensive, "electro": electro},
    }

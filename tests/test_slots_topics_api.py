# tests/test_slots_topics_api.py

from eventhub.models.registration import Registration
from eventhub.models.topic import Topic


def test_create_slot(client):
    event = client.post("/api/v1/events", json={"name": "Workshop"}).json()

    response = client.post("/api/v1/slots", json={
        "name": "Morning", "date": "2024-01-15", "time": "09:00 - 10:20", "event_id": event["id"],
    })

    assert response.status_code == 201
    data = response.json()
    assert data["event"]["id"] == event["id"]
    assert data["topics"] == []
    assert data["registration_count"] == 0


def test_create_slot_missing_fields(client):
    event = client.post("/api/v1/events", json={"name": "Workshop"}).json()
    response = client.post("/api/v1/slots", json={"name": "Morning", "event_id": event["id"]})
    assert response.status_code == 400


def test_create_slot_unknown_event(client):
    response = client.post("/api/v1/slots", json={
        "name": "Morning", "date": "2024-01-15", "time": "09:00", "event_id": 99,
    })
    assert response.status_code == 404


def test_list_slots_filtered_by_event(client, workshop):
    other = client.post("/api/v1/events", json={"name": "Other"}).json()
    client.post("/api/v1/slots", json={"name": "Other slot", "date": "2024-02-01", "time": "10:00", "event_id": other["id"]})

    all_slots = client.get("/api/v1/slots").json()
    event_slots = client.get("/api/v1/slots", params={"event_id": workshop["event"]["id"]}).json()

    assert len(all_slots) == 3
    assert [s["name"] for s in event_slots] == ["Morning Session", "Afternoon Session"]
    assert len(event_slots[0]["topics"]) == 2


def test_update_slot(client, workshop):
    slot = workshop["slots"][0]

    response = client.put(f"/api/v1/slots/{slot['id']}", json={
        "name": "Early Session", "date": "2024-01-16", "time": "08:00 - 09:00",
    })

    assert response.status_code == 200
    assert response.json()["name"] == "Early Session"
    assert response.json()["date"] == "2024-01-16"
    assert client.put("/api/v1/slots/999", json={"name": "x", "date": "d", "time": "t"}).status_code == 404


def test_delete_slot_cascades_topics_and_registrations(client, workshop, db_session):
    slot = workshop["slots"][0]
    client.post("/api/v1/registrations", json={
        "email": "ana@example.com", "slot_id": slot["id"], "topic_id": workshop["topics"]["imaging"]["id"],
    })

    response = client.delete(f"/api/v1/slots/{slot['id']}")

    assert response.status_code == 204
    assert client.get(f"/api/v1/slots/{slot['id']}").status_code == 404
    assert db_session.query(Topic).count() == 1
    assert db_session.query(Registration).count() == 0


def test_create_topic_defaults_capacity(client, workshop):
    electro = workshop["topics"]["electro"]
    assert electro["max_participants"] == 15
    assert electro["slot"]["event"]["id"] == workshop["event"]["id"]
    assert electro["is_full"] is False


def test_create_topic_validation(client, workshop):
    slot = workshop["slots"][0]
    missing_instructor = {"title": "T", "description": "D", "slot_id": slot["id"]}
    assert client.post("/api/v1/topics", json=missing_instructor).status_code == 400

    zero_capacity = {"title": "T", "description": "D", "instructor": "I", "max_participants": 0, "slot_id": slot["id"]}
    assert client.post("/api/v1/topics", json=zero_capacity).status_code == 400

    unknown_slot = {"title": "T", "description": "D", "instructor": "I", "slot_id": 999}
    assert client.post("/api/v1/topics", json=unknown_slot).status_code == 404


def test_list_topics_filtered_by_event(client, workshop):
    other = client.post("/api/v1/events", json={"name": "Other"}).json()
    other_slot = client.post("/api/v1/slots", json={
        "name": "Other slot", "date": "2024-02-01", "time": "10:00", "event_id": other["id"],
    }).json()
    client.post("/api/v1/topics", json={
        "title": "Other topic", "description": "D", "instructor": "I", "slot_id": other_slot["id"],
    })

    assert len(client.get("/api/v1/topics").json()) == 4
    titles = [t["title"] for t in client.get("/api/v1/topics", params={"event_id": workshop["event"]["id"]}).json()]
    assert titles == ["Imaging", "Intensive Care", "Electrophysiology"]


def test_update_topic(client, workshop):
    topic = workshop["topics"]["imaging"]
    other_slot = workshop["slots"][1]

    response = client.put(f"/api/v1/topics/{topic['id']}", json={
        "title": "Advanced Imaging", "description": "MRI and CT", "instructor": "W. Kosmala",
        "max_participants": 5, "slot_id": other_slot["id"],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Advanced Imaging"
    assert data["max_participants"] == 5
    assert data["slot_id"] == other_slot["id"]


def test_delete_topic(client, workshop, db_session):
    topic = workshop["topics"]["imaging"]
    client.post("/api/v1/registrations", json={
        "email": "ana@example.com", "slot_id": workshop["slots"][0]["id"], "topic_id": topic["id"],
    })

    assert client.delete(f"/api/v1/topics/{topic['id']}").status_code == 204
    assert client.get(f"/api/v1/topics/{topic['id']}").status_code == 404
    assert db_session.query(Registration).count() == 0
    assert client.delete(f"/api/v1/topics/{topic['id']}").status_code == 404


def test_workshop_data(client, workshop):
    slot = workshop["slots"][0]
    client.post("/api/v1/registrations", json={
        "email": "ana@example.com", "slot_id": slot["id"], "topic_id": workshop["topics"]["imaging"]["id"],
    })

    data = client.get("/api/v1/workshop-data").json()

    assert [s["name"] for s in data] == ["Morning Session", "Afternoon Session"]
    assert data[0]["registration_count"] == 1
    counts = {t["title"]: t["registration_count"] for t in data[0]["topics"]}
    assert counts == {"Imaging": 1, "Intensive Care": 0}


def test_workshop_data_for_one_event(client, workshop):
    other = client.post("/api/v1/events", json={"name": "Other"}).json()
    client.post("/api/v1/slots", json={"name": "Other slot", "date": "2024-02-01", "time": "10:00", "event_id": other["id"]})

    data = client.get("/api/v1/workshop-data", params={"event_id": other["id"]}).json()

    assert [s["name"] for s in data] == ["Other slot"]

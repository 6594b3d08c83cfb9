# tests/test_events_api.py

from eventhub.models.registration import Registration
from eventhub.models.slot import Slot
from eventhub.models.topic import Topic


def test_create_event(client):
    response = client.post("/api/v1/events", json={"name": "Workshop", "description": "Hands-on"})

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Workshop"
    assert data["is_active"] is True
    assert data["slots"] == []
    assert len(data["uuid"]) == 36
    assert data["url"].endswith(f"/event/{data['uuid']}")
    assert data["api_url"].endswith(f"/api/v1/events/{data['id']}")


def test_create_event_requires_name(client):
    response = client.post("/api/v1/events", json={"description": "No name"})
    assert response.status_code == 400

    response = client.post("/api/v1/events", json={"name": ""})
    assert response.status_code == 400


def test_list_events_newest_first_and_active_filter(client):
    first = client.post("/api/v1/events", json={"name": "First"}).json()
    second = client.post("/api/v1/events", json={"name": "Second"}).json()
    client.put(f"/api/v1/events/{first['id']}", json={"is_active": False})

    names = [e["name"] for e in client.get("/api/v1/events").json()]
    assert names == ["Second", "First"]

    active = client.get("/api/v1/events", params={"active": "true"}).json()
    assert [e["id"] for e in active] == [second["id"]]


def test_read_event_by_id_and_uuid(client, workshop):
    event = workshop["event"]

    by_id = client.get(f"/api/v1/events/{event['id']}")
    by_uuid = client.get(f"/api/v1/events/{event['uuid']}")

    assert by_id.status_code == 200
    assert by_uuid.status_code == 200
    assert by_id.json()["id"] == by_uuid.json()["id"] == event["id"]
    slots = by_uuid.json()["slots"]
    assert [s["name"] for s in slots] == ["Morning Session", "Afternoon Session"]
    assert len(slots[0]["topics"]) == 2
    assert slots[0]["topics"][0]["registrations"] == []


def test_read_event_includes_topic_registrations(client, workshop):
    slot = workshop["slots"][0]
    topic = workshop["topics"]["imaging"]
    client.post("/api/v1/registrations", json={
        "email": "ana@example.com", "name": "Ana", "slot_id": slot["id"], "topic_id": topic["id"],
    })

    data = client.get(f"/api/v1/events/{workshop['event']['uuid']}").json()
    imaging = data["slots"][0]["topics"][0]
    assert imaging["registration_count"] == 1
    assert imaging["registrations"][0]["email"] == "ana@example.com"
    assert imaging["registrations"][0]["name"] == "Ana"


def test_read_event_not_found(client):
    assert client.get("/api/v1/events/999").status_code == 404
    assert client.get("/api/v1/events/not-a-uuid").status_code == 404


def test_update_event(client):
    event = client.post("/api/v1/events", json={"name": "Old", "description": "Old description"}).json()

    response = client.put(f"/api/v1/events/{event['id']}", json={"name": "New", "is_active": False})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "New"
    assert data["description"] == "Old description"
    assert data["is_active"] is False


def test_update_event_ignores_null_name(client):
    event = client.post("/api/v1/events", json={"name": "Keep"}).json()

    response = client.put(f"/api/v1/events/{event['id']}", json={"name": None, "description": None})

    assert response.status_code == 200
    assert response.json()["name"] == "Keep"
    assert response.json()["description"] is None


def test_update_missing_event(client):
    assert client.put("/api/v1/events/42", json={"name": "x"}).status_code == 404


def test_delete_event_cascades(client, workshop, db_session):
    slot = workshop["slots"][0]
    topic = workshop["topics"]["imaging"]
    client.post("/api/v1/registrations", json={
        "email": "ana@example.com", "slot_id": slot["id"], "topic_id": topic["id"],
    })
    assert db_session.query(Registration).count() == 1

    response = client.delete(f"/api/v1/events/{workshop['event']['id']}")

    assert response.status_code == 204
    assert client.get(f"/api/v1/events/{workshop['event']['id']}").status_code == 404
    assert db_session.query(Slot).count() == 0
    assert db_session.query(Topic).count() == 0
    assert db_session.query(Registration).count() == 0


def test_delete_missing_event(client):
    assert client.delete("/api/v1/events/42").status_code == 404

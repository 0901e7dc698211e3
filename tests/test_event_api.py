from helpers import ORGANIZER_CODE, VOLUNTEER_CODE


def _new_event():
    return {
        "id": "fall-workday",
        "name": "Fall Work Day",
        "date": "2024-10-05",
        "time": "8:00 AM - 12:00 PM",
        "description": "Leaves and gutters.",
        "organizerEmail": "chair@club.com",
        "tasks": [{"id": "leaves", "name": "Leaf Raking", "needed": 5, "volunteers": []}],
    }


def test_get_event_returns_seed(client):
    resp = client.get("/api/event")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Spring Cleanup & Maintenance"
    landscaping = body["tasks"][0]
    assert (landscaping["id"], landscaping["needed"], landscaping["volunteers"]) == ("landscaping", 6, [])


def test_get_event_reports_storage_failure(client, store):
    store.events_path.unlink()
    resp = client.get("/api/event")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to load event data"}


def test_organizer_replaces_event(client, store):
    resp = client.post("/api/event", json={"gateCode": ORGANIZER_CODE, "eventData": _new_event()})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Event updated successfully"}
    assert client.get("/api/event").json() == _new_event()
    assert store.read_event() == _new_event()


def test_replace_stores_shape_as_given(client):
    # Over-capacity rosters are accepted on this path.
    event = _new_event()
    event["tasks"][0]["needed"] = 0
    event["tasks"][0]["volunteers"] = [{"id": "1", "name": "Early Bird"}]
    event["extra"] = {"anything": True}

    resp = client.post("/api/event", json={"gateCode": ORGANIZER_CODE, "eventData": event})

    assert resp.status_code == 200
    assert client.get("/api/event").json() == event


def test_replace_with_wrong_code_leaves_event_unchanged(client, store):
    before = store.events_path.read_bytes()

    for code in (VOLUNTEER_CODE, "0000", "", None):
        resp = client.post("/api/event", json={"gateCode": code, "eventData": _new_event()})
        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid organizer gate code"}

    assert store.events_path.read_bytes() == before


def test_replace_requires_event_object(client):
    resp = client.post("/api/event", json={"gateCode": ORGANIZER_CODE, "eventData": None})
    assert resp.status_code == 422


def test_replace_reports_write_failure(client, store, monkeypatch):
    monkeypatch.setattr(store, "write_event", lambda event: False)
    resp = client.post("/api/event", json={"gateCode": ORGANIZER_CODE, "eventData": _new_event()})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to update event"}


def test_verify_gate_codes(client):
    ok_volunteer = client.post("/api/verify-gate-code", json={"code": VOLUNTEER_CODE, "type": "volunteer"})
    ok_organizer = client.post("/api/verify-gate-code", json={"code": ORGANIZER_CODE, "type": "organizer"})
    crossed = client.post("/api/verify-gate-code", json={"code": ORGANIZER_CODE, "type": "volunteer"})
    no_type = client.post("/api/verify-gate-code", json={"code": VOLUNTEER_CODE})

    assert ok_volunteer.status_code == 200
    assert ok_volunteer.json() == {"valid": True, "message": "Volunteer gate code verified"}
    assert ok_organizer.json() == {"valid": True, "message": "Organizer gate code verified"}
    assert crossed.status_code == 401
    assert crossed.json() == {"valid": False, "message": "Invalid gate code"}
    assert no_type.status_code == 401


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_numeric_codes_are_unauthorized(client, store):
    before = store.events_path.read_bytes()

    replace = client.post("/api/event", json={"gateCode": 5791, "eventData": _new_event()})
    check = client.post("/api/verify-gate-code", json={"code": 1957, "type": "volunteer"})
    bad_type = client.post("/api/verify-gate-code", json={"code": VOLUNTEER_CODE, "type": ["volunteer"]})

    assert replace.status_code == 401
    assert replace.json() == {"error": "Invalid organizer gate code"}
    assert check.status_code == 401
    assert check.json() == {"valid": False, "message": "Invalid gate code"}
    assert bad_type.status_code == 401
    assert store.events_path.read_bytes() == before

"""HTTP tests for the registration, notification and summary routers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from app.config import settings
from app.database import get_db
from app.main import app

ROBIN = {
    "occupant_name": "Robin Schneider",
    "occupant_type": "tenant",
    "email": "Robin@x.com",
    "phone": "555-1",
    "vehicle_slot": "primary",
    "vehicle_plate": "abc-123",
    "hours_approved": 2,
}


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRegistrationsAPI:
    def test_create_returns_normalized_record(self, client):
        resp = client.post("/api/v1/registrations", json=ROBIN)
        assert resp.status_code == 201
        body = resp.json()
        assert body["vehicle_plate"] == "ABC-123"
        assert body["email"] == "robin@x.com"
        assert body["status"] == "approved"
        assert body["available_actions"] == ["parked", "completed"]

    def test_rejection_echoes_candidate(self, client):
        client.post("/api/v1/registrations", json=ROBIN)
        resp = client.post("/api/v1/registrations", json=ROBIN)
        assert resp.status_code == 422
        body = resp.json()
        assert body["reason"] == "SlotAlreadyUsed"
        assert body["slot"] == "primary"
        assert body["candidate"]["email"] == "Robin@x.com"

    def test_missing_fields_rejected_in_order(self, client):
        resp = client.post("/api/v1/registrations", json={**ROBIN, "occupant_name": "", "email": ""})
        assert resp.json()["reason"] == "MissingName"

    def test_secondary_first_rejected(self, client):
        resp = client.post("/api/v1/registrations", json={**ROBIN, "vehicle_slot": "secondary"})
        assert resp.json()["reason"] == "PrimaryVehicleRequiredFirst"

    def test_unknown_slot_is_schema_error(self, client):
        resp = client.post("/api/v1/registrations", json={**ROBIN, "vehicle_slot": "tertiary"})
        assert resp.status_code == 422
        assert "reason" not in resp.json()

    def test_status_update_unknown_id(self, client):
        client.post("/api/v1/registrations", json=ROBIN)
        resp = client.patch("/api/v1/registrations/does-not-exist/status", json={"status": "parked"})
        assert resp.status_code == 200
        assert resp.json() == {"id": "does-not-exist", "updated": False, "status": None}
        assert client.get("/api/v1/registrations").json()[0]["status"] == "approved"

    def test_status_update_and_summary(self, client):
        reg_id = client.post("/api/v1/registrations", json=ROBIN).json()["id"]
        client.post("/api/v1/registrations", json={**ROBIN, "email": "guest@x.com",
                                                   "occupant_type": "guest", "hours_approved": 5})
        assert client.get("/api/v1/summary").json() == {"active": 2, "tenants": 1, "guests": 1, "total_hours": 7}

        resp = client.patch(f"/api/v1/registrations/{reg_id}/status", json={"status": "completed"})
        assert resp.json() == {"id": reg_id, "updated": True, "status": "completed"}
        assert client.get("/api/v1/summary").json() == {"active": 1, "tenants": 0, "guests": 1, "total_hours": 5}

    def test_enforced_transition_conflict(self, client):
        reg_id = client.post("/api/v1/registrations", json=ROBIN).json()["id"]
        client.patch(f"/api/v1/registrations/{reg_id}/status", json={"status": "completed"})
        with patch.object(settings, "ENFORCE_STATUS_TRANSITIONS", True):
            resp = client.patch(f"/api/v1/registrations/{reg_id}/status", json={"status": "parked"})
        assert resp.status_code == 409

    def test_get_registration_not_found(self, client):
        assert client.get("/api/v1/registrations/nope").status_code == 404

    def test_account_view(self, client):
        client.post("/api/v1/registrations", json=ROBIN)
        client.post("/api/v1/registrations", json={**ROBIN, "vehicle_slot": "secondary", "vehicle_plate": "xyz-1"})
        plates = [r["vehicle_plate"] for r in client.get("/api/v1/accounts/ROBIN@x.com/registrations").json()]
        assert plates == ["ABC-123", "XYZ-1"]

    def test_notifications_newest_first(self, client):
        client.post("/api/v1/registrations", json={**ROBIN, "hours_approved": 1})
        client.post("/api/v1/registrations", json={**ROBIN, "email": "b@x.com", "vehicle_plate": "bbb-2"})
        feed = client.get("/api/v1/notifications").json()
        assert [n["headline"] for n in feed] == [
            "Parking slot approved for BBB-2",
            "Parking slot approved for ABC-123",
        ]
        assert feed[1]["details"] == "Confirmation sent to robin@x.com and 555-1 for 1 hour."

    def test_notifications_limit_zero(self, client):
        client.post("/api/v1/registrations", json=ROBIN)
        assert client.get("/api/v1/notifications?limit=0").json() == []

    def test_notifications_negative_limit_rejected(self, client):
        assert client.get("/api/v1/notifications?limit=-1").status_code == 422

    def test_health(self, client):
        assert client.get("/api/v1/health").json()["database"] == "ok"

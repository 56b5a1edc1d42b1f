from __future__ import annotations

from datetime import datetime

import pytest

from siskamling.main import create_app
from siskamling.storage.kv_store import InMemoryKeyValueStore

# Tuesday morning: the form belongs to Monday night.
NOW = datetime(2025, 10, 21, 6, 30)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def app(store):
    application = create_app("siskamling.config.testing", store=store, clock=lambda: NOW)
    application.config.update(TESTING=True)
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


def _fill_all(client, status="Hadir"):
    members = client.get("/api/schedules/today").get_json()["roster"]["members"]
    for member in members:
        client.post("/api/attendance/status", json={"member": member, "status": status})
    return members


def test_today_shows_previous_night_roster(client):
    data = client.get("/api/schedules/today").get_json()

    assert data["roster"]["title"] == "SENIN MALAM SELASA"
    assert data["date_label"] == "Selasa, 21 Oktober 2025"


def test_schedules_list_has_seven_rosters(client):
    assert len(client.get("/api/schedules").get_json()) == 7


def test_submit_incomplete_returns_missing_members(client, store):
    client.post("/api/attendance/status", json={"member": "Bp Aris H01", "status": "Hadir"})

    response = client.post("/api/attendance/submit")

    assert response.status_code == 422
    assert "Bp Erik" in response.get_json()["missing_members"]
    assert store.get("siskamlingSubmissions") is None


def test_full_flow_submit_then_recap(client):
    _fill_all(client)
    client.post("/api/attendance/status", json={"member": "Bp Erik", "status": "SICK"})
    client.post("/api/attendance/notes", json={"member": "Bp Erik", "notes": "diganti Bp Eka"})
    client.post("/api/attendance/prelek", json={"amount": "75000"})

    submitted = client.post("/api/attendance/submit").get_json()

    assert submitted["success"] is True
    assert submitted["persisted"] is True
    assert submitted["analysis"]["status_counts"] == {"Hadir": 4, "Izin": 0, "Sakit": 1, "Alpa": 0}
    assert submitted["analysis"]["notes"] == [{"member_name": "Bp Erik", "note": "diganti Bp Eka"}]

    recap = client.get("/api/recap", query_string={"schedule": "SENIN MALAM SELASA"}).get_json()
    assert recap["count"] == 1
    assert recap["submissions"][0]["status_counts"] == submitted["analysis"]["status_counts"]
    assert recap["submissions"][0]["prelek_display"] == "Rp 75.000"

    assert client.get("/api/recap", query_string={"schedule": "RABU MALAM KAMIS"}).get_json()["count"] == 0


def test_notes_refused_for_present_member(client):
    client.post("/api/attendance/status", json={"member": "Bp Yayan", "status": "Hadir"})

    response = client.post("/api/attendance/notes", json={"member": "Bp Yayan", "notes": "x"})

    assert response.status_code == 400


def test_unknown_member_is_bad_request(client):
    response = client.post("/api/attendance/status", json={"member": "Bp Siapa", "status": "Hadir"})

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_unknown_status_is_bad_request(client):
    response = client.post("/api/attendance/status", json={"member": "Bp Yayan", "status": "Telat"})

    assert response.status_code == 400


def test_reset_after_submit(client):
    _fill_all(client)
    client.post("/api/attendance/submit")

    data = client.post("/api/attendance/reset").get_json()

    assert data["state"] == "DRAFTING"
    assert data["analysis"] is None
    assert all(row["status"] is None for row in data["attendance"])


def test_recap_survives_corrupt_store(client, store):
    store.set("siskamlingSubmissions", "{broken")

    data = client.get("/api/recap").get_json()

    assert data["count"] == 0
    assert data["filter"] == "all"


def test_recap_csv_export(client):
    _fill_all(client, status="Izin")
    client.post("/api/attendance/submit")

    response = client.get("/api/recap/export.csv")

    assert response.mimetype == "text/csv"
    lines = response.data.decode("utf-8-sig").splitlines()
    assert lines[0].startswith("id,submitted_at,schedule_title,Hadir,Izin,Sakit,Alpa")
    assert len(lines) == 2

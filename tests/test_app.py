from __future__ import annotations

from datetime import timedelta

import pytest

from src.college_attendance.college_attendance.container import build_container
from src.college_attendance.college_attendance.core.enums import AttendanceStatus
from src.college_attendance.college_attendance.datastore.store import RecordStore
from src.college_attendance.college_attendance.main import create_app


@pytest.fixture
def app(monkeypatch, fixed_now, students, departments, make_record):
    monkeypatch.setenv("APP_ENV", "testing")
    today = fixed_now.date()
    records = [
        make_record("a", today, AttendanceStatus.PRESENT, "Math"),
        make_record("b", today, AttendanceStatus.ABSENT, "Math"),
        make_record("c", today - timedelta(days=3), AttendanceStatus.LATE, "Physics"),
    ]
    store = RecordStore.from_iterables(students=students, records=records, departments=departments)
    application = create_app(container=build_container(store=store, clock=lambda: fixed_now))
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


def test_health_endpoint(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_analytics_report(client):
    response = client.get("/api/analytics?window=7")
    data = response.get_json()

    assert response.status_code == 200
    assert data["window_days"] == 7
    assert data["department"] == "all"
    assert data["subjects"][0] == {"subject": "Math", "attendance_rate": 50, "total_classes": 2}
    assert data["daily"][-1]["work_date"] == "2026-02-01"
    assert data["daily"][-1]["label"] == "Feb 1"
    assert data["students"][0]["student"]["full_name"] == "Asha Rao"
    assert {d["department"] for d in data["departments"]} == {
        "Computer Science",
        "Electrical Engineering",
        "Mechanical Engineering",
    }


def test_invalid_window_is_bad_request(client):
    response = client.get("/api/analytics/daily?window=14")

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_unknown_department_is_bad_request(client):
    response = client.get("/api/analytics/subjects?window=7&department=Astrology")
    assert response.status_code == 400


def test_today_snapshot_endpoint(client):
    data = client.get("/api/analytics/today").get_json()

    assert data == {
        "total_students": 3,
        "present_today": 1,
        "late_today": 0,
        "absent_today": 2,
        "attendance_rate": 33,
    }


def test_weekly_and_department_today(client):
    week = client.get("/api/analytics/weekly").get_json()
    assert len(week) == 7
    assert week[-1]["work_date"] == "2026-02-01"

    depts = client.get("/api/analytics/departments/today").get_json()
    assert [d["code"] for d in depts] == ["CS", "EE", "ME"]


def test_students_listing_and_totals(client):
    data = client.get("/api/students?department=Computer%20Science").get_json()
    assert [s["student_id"] for s in data["students"]] == ["a", "c"]
    assert data["summary"]["listed"] == 2

    totals = client.get("/api/students/a/attendance").get_json()
    assert totals["attendance_rate"] == 100
    assert totals["band"] == "excellent"


def test_unknown_student_is_not_found(client):
    response = client.get("/api/students/zzz/attendance")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_roster(client):
    data = client.get("/api/attendance/roster?date=2026-02-01&subject=Math").get_json()

    states = {r["student_id"]: r["state"] for r in data["rows"]}
    assert states == {"a": "present", "b": "absent", "c": "not-marked"}
    assert data["stats"]["marked_students"] == 2


@pytest.mark.parametrize(
    "query",
    ["/api/attendance/roster?date=2026-02-01", "/api/attendance/roster?date=01/02/2026&subject=Math"],
)
def test_roster_bad_params(client, query):
    assert client.get(query).status_code == 400


def test_report_downloads(client):
    csv_response = client.get("/api/analytics/report.csv?window=30")
    assert csv_response.status_code == 200
    assert csv_response.mimetype == "text/csv"
    assert "attendance_report_30d_all.csv" in csv_response.headers["Content-Disposition"]

    xlsx_response = client.get("/api/analytics/report.xlsx?window=7")
    assert xlsx_response.status_code == 200
    assert xlsx_response.data[:2] == b"PK"


def test_roster_defaults_to_clock_date(client):
    data = client.get("/api/attendance/roster?subject=Math").get_json()

    assert data["date"] == "2026-02-01"
    states = {r["student_id"]: r["state"] for r in data["rows"]}
    assert states == {"a": "present", "b": "absent", "c": "not-marked"}

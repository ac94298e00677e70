"""HTTP tests for the API routes."""

import pytest


@pytest.fixture
def college(client):
    response = client.post("/api/colleges", json={"name": "Stanford University"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def event(client, college):
    response = client.post("/api/events", json={
        "collegeId": college["id"],
        "name": "Tech Career Fair",
        "type": "Career",
        "description": "Meet top tech companies",
        "date": "2025-04-10T09:00:00Z",
        "maxCapacity": 200,
        "createdBy": "Career Services",
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def student(client, college):
    response = client.post("/api/students", json={
        "collegeId": college["id"],
        "name": "Emma Rodriguez",
        "email": "emma@stanford.edu",
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def registration(client, event, student):
    response = client.post("/api/registrations", json={"eventId": event["id"], "studentId": student["id"]})
    assert response.status_code == 201
    return response.json()


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

def test_college_crud(client, college):
    assert client.get(f"/api/colleges/{college['id']}").json()["name"] == "Stanford University"

    response = client.put(f"/api/colleges/{college['id']}", json={"name": "Stanford"})
    assert response.status_code == 200
    assert response.json()["name"] == "Stanford"

    assert [c["name"] for c in client.get("/api/colleges").json()] == ["Stanford"]

    assert client.delete(f"/api/colleges/{college['id']}").status_code == 204
    assert client.get(f"/api/colleges/{college['id']}").status_code == 404


def test_unknown_ids_return_404(client):
    assert client.get("/api/colleges/nope").status_code == 404
    assert client.get("/api/events/nope").status_code == 404
    assert client.get("/api/students/nope").status_code == 404
    assert client.put("/api/events/nope", json={"name": "x"}).status_code == 404
    assert client.put("/api/attendance/nope", json={"attended": True}).status_code == 404
    assert client.delete("/api/students/nope").status_code == 404
    assert client.delete("/api/registrations/nope").status_code == 404


def test_invalid_payloads_return_422(client, college, registration):
    assert client.post("/api/colleges", json={"name": ""}).status_code == 422
    assert client.post("/api/students", json={
        "collegeId": college["id"], "name": "Bad", "email": "not-an-email",
    }).status_code == 422
    assert client.post("/api/feedback", json={
        "registrationId": registration["id"], "rating": 6,
    }).status_code == 422
    assert client.put("/api/attendance/any", json={"attended": "yes"}).status_code == 422


def test_event_partial_update(client, event):
    response = client.put(f"/api/events/{event['id']}", json={"maxCapacity": 150})

    assert response.status_code == 200
    body = response.json()
    assert body["maxCapacity"] == 150
    assert body["name"] == event["name"]


def test_event_date_with_offset_is_stored_in_utc(client, college):
    response = client.post("/api/events", json={
        "collegeId": college["id"],
        "name": "Offset Meetup",
        "type": "Meetup",
        "date": "2025-03-01T10:00:00+05:00",
        "maxCapacity": 20,
        "createdBy": "Students Union",
    })
    assert response.status_code == 201
    assert response.json()["date"] == "2025-03-01T05:00:00+00:00"

    fetched = client.get(f"/api/events/{response.json()['id']}").json()
    assert fetched["date"] == "2025-03-01T05:00:00+00:00"

    moved = client.put(f"/api/events/{fetched['id']}", json={"date": "2025-03-02T01:30:00-02:00"})
    assert moved.json()["date"] == "2025-03-02T03:30:00+00:00"


def test_null_for_required_field_in_patch_is_rejected(client, college, event, student):
    assert client.put(f"/api/colleges/{college['id']}", json={"name": None}).status_code == 422
    for field in ("collegeId", "name", "type", "date", "maxCapacity", "createdBy"):
        assert client.put(f"/api/events/{event['id']}", json={field: None}).status_code == 422
    for field in ("collegeId", "name", "email"):
        assert client.put(f"/api/students/{student['id']}", json={field: None}).status_code == 422

    assert client.get(f"/api/colleges/{college['id']}").json()["name"] == college["name"]


def test_event_description_can_be_cleared(client, event):
    response = client.put(f"/api/events/{event['id']}", json={"description": None})

    assert response.status_code == 200
    assert response.json()["description"] is None


def test_events_list_includes_college_and_count(client, event, registration, college):
    [row] = client.get("/api/events").json()

    assert row["id"] == event["id"]
    assert row["college"]["id"] == college["id"]
    assert row["registrationCount"] == 1


def test_students_list_includes_college(client, student, college):
    [row] = client.get("/api/students").json()

    assert row["email"] == "emma@stanford.edu"
    assert row["college"]["name"] == college["name"]


def test_duplicate_email_is_conflict(client, college, student):
    response = client.post("/api/students", json={
        "collegeId": college["id"], "name": "Copy", "email": student["email"],
    })

    assert response.status_code == 409


def test_duplicate_registration_is_conflict(client, event, student, registration):
    response = client.post("/api/registrations", json={"eventId": event["id"], "studentId": student["id"]})

    assert response.status_code == 409


def test_delete_event_with_registrations_is_conflict(client, event, registration):
    assert client.delete(f"/api/events/{event['id']}").status_code == 409
    assert client.get(f"/api/events/{event['id']}").status_code == 200


def test_attendance_and_feedback_flow(client, event, registration):
    marked = client.post("/api/attendance", json={"registrationId": registration["id"], "attended": False})
    assert marked.status_code == 201

    updated = client.put(f"/api/attendance/{marked.json()['id']}", json={"attended": True})
    assert updated.status_code == 200
    assert updated.json()["attended"] is True

    submitted = client.post("/api/feedback", json={
        "registrationId": registration["id"], "rating": 4, "comment": "Useful",
    })
    assert submitted.status_code == 201

    [attendance] = client.get(f"/api/events/{event['id']}/attendance").json()
    assert attendance["registration"]["student"]["name"] == "Emma Rodriguez"

    [feedback] = client.get(f"/api/events/{event['id']}/feedback").json()
    assert feedback["rating"] == 4

    [listed] = client.get("/api/registrations").json()
    assert listed["event"]["id"] == event["id"]


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def test_report_shapes(client, event, student, registration):
    client.post("/api/attendance", json={"registrationId": registration["id"], "attended": True})
    client.post("/api/feedback", json={"registrationId": registration["id"], "rating": 5})

    assert client.get("/api/reports/event-registrations").json() == [
        {"eventId": event["id"], "eventName": event["name"], "totalRegistrations": 1}
    ]
    assert client.get("/api/reports/event-attendance").json() == [
        {"eventId": event["id"], "eventName": event["name"], "attendancePercentage": 100}
    ]
    assert client.get("/api/reports/event-feedback").json() == [
        {"eventId": event["id"], "eventName": event["name"], "averageRating": 5}
    ]
    assert client.get("/api/reports/event-popularity").json() == [
        {"eventId": event["id"], "eventName": event["name"], "registrations": 1}
    ]
    expected_student = {"studentId": student["id"], "studentName": student["name"], "eventsAttended": 1}
    assert client.get("/api/reports/student-participation").json() == [expected_student]
    assert client.get("/api/reports/top-active-students").json() == [expected_student]


def test_dashboard_stats(client, event, registration):
    response = client.get("/api/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalEvents": 1,
        "totalStudents": 1,
        "totalRegistrations": 1,
        "averageAttendanceRate": 0,
        "averageRating": 0,
    }


def test_reports_on_empty_store(client):
    for path in (
        "/api/reports/event-registrations",
        "/api/reports/event-attendance",
        "/api/reports/event-feedback",
        "/api/reports/event-popularity",
        "/api/reports/student-participation",
        "/api/reports/top-active-students",
    ):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json() == []

from __future__ import annotations

import pytest

from src.classroom_admin.classroom_admin.main import create_app


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def _add_student(client, name="Rahul", subjects=("Company Law",), group="Group 1"):
    return client.post("/api/students", json={"name": name, "group": group, "subjects": list(subjects)})


def _add_class(client, subject="Company Law"):
    return client.post("/api/classes", json={"subject": subject, "start_time": "09:00", "end_time": "10:30"})


def test_create_student_requires_name_and_subject(client):
    assert _add_student(client, name="").status_code == 400
    assert _add_student(client, subjects=()).status_code == 400
    assert client.get("/api/students").get_json() == []

    resp = _add_student(client)
    assert resp.status_code == 201
    assert resp.get_json()["student"]["name"] == "Rahul"
    assert len(client.get("/api/students").get_json()) == 1


def test_catalog(client):
    assert client.get("/api/catalog/groups").get_json() == ["Group 1", "Group 2"]
    assert client.get("/api/catalog/groups/Group%202/subjects").get_json()[0] == "Securities Laws"
    assert client.get("/api/catalog/groups/Group%209/subjects").get_json() == []


def test_dashboard_counts_follow_mutations(client):
    assert client.get("/api/dashboard").get_json()["stats"]["total_students"] == 0
    _add_student(client)
    _add_class(client)
    stats = client.get("/api/dashboard").get_json()["stats"]
    assert stats["total_students"] == 1
    assert stats["active_classes"] == 1
    assert stats["subject_count"] == 1


def test_enroll_and_class_students(client):
    student_id = _add_student(client, subjects=("Financial Accounting",)).get_json()["student"]["id"]
    class_id = _add_class(client).get_json()["class"]["id"]

    assert client.get(f"/api/classes/{class_id}/students").get_json() == []
    first = client.post(f"/api/classes/{class_id}/enroll", json={"student_id": student_id}).get_json()
    second = client.post(f"/api/classes/{class_id}/enroll", json={"student_id": student_id}).get_json()

    assert first["changed"] is True
    assert second["changed"] is False
    assert second["class"]["enrolled_students"] == [student_id]
    assert client.post("/api/classes/missing/enroll", json={"student_id": student_id}).status_code == 404


def test_attendance_flow(client):
    a = _add_student(client, name="A").get_json()["student"]["id"]
    b = _add_student(client, name="B").get_json()["student"]["id"]
    class_id = _add_class(client).get_json()["class"]["id"]

    assert client.get("/api/attendance/session").status_code == 400

    sheet = client.post("/api/attendance/session", json={"class_id": class_id}).get_json()["sheet"]
    assert [r["student_id"] for r in sheet["students"]] == [a, b]
    assert sheet["present"] == 0

    sheet = client.post("/api/attendance/session/toggle", json={"student_id": b}).get_json()["sheet"]
    assert sheet["present"] == 1

    records = client.post("/api/attendance/session/save").get_json()["records"]
    assert [(r["student_id"], r["is_present"]) for r in records] == [(a, False), (b, True)]
    assert len(client.get(f"/api/classes/{class_id}/attendance").get_json()) == 2

    client.delete("/api/attendance/session")
    assert client.get("/api/attendance/session").status_code == 400


def test_attendance_unknown_class_is_404(client):
    assert client.post("/api/attendance/session", json={"class_id": "nope"}).status_code == 404


@pytest.mark.parametrize(
    "url, body",
    [
        ("/api/students", ["x"]),
        ("/api/students", {"name": "Rahul", "subjects": "Company Law"}),
        ("/api/classes", ["x"]),
        ("/api/classes", {"start_time": "09:00", "end_time": "10:30", "max_students": float("inf")}),
        ("/api/attendance/session", ["x"]),
    ],
)
def test_malformed_bodies_are_rejected(client, url, body):
    resp = client.post(url, json=body)
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_malformed_enroll_body_is_rejected(client):
    class_id = _add_class(client).get_json()["class"]["id"]
    assert client.post(f"/api/classes/{class_id}/enroll", json=["x"]).status_code == 400

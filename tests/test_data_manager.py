from __future__ import annotations

from src.classroom_admin.classroom_admin.core.enums import ChangeKind


def test_add_student_appends_and_keeps_fields(manager, make_student, fixed_now):
    before = len(manager.students)
    student = manager.add_student(make_student("Rahul", subjects=("Company Law", "Corporate Governance")))

    assert len(manager.students) == before + 1
    stored = manager.get_student(student.student_id)
    assert stored == student
    assert stored.name == "Rahul"
    assert stored.enrolled_subjects == ("Company Law", "Corporate Governance")
    assert stored.joining_date == fixed_now
    assert stored.is_active is True


def test_add_student_accepts_empty_name(manager, make_student):
    manager.add_student(make_student(""))
    assert manager.students[0].name == ""


def test_student_ids_are_unique(manager, make_student):
    a = manager.add_student(make_student("A"))
    b = manager.add_student(make_student("A"))
    assert a.student_id != b.student_id


def test_enroll_student_is_idempotent(manager, make_student, make_class):
    student = manager.add_student(make_student())
    session = manager.add_class(make_class())

    assert manager.enroll_student(student.student_id, session.class_id) is True
    assert manager.enroll_student(student.student_id, session.class_id) is False

    assert manager.get_class(session.class_id).enrolled_students == (student.student_id,)


def test_enroll_student_unknown_class_is_noop(manager, make_student, make_class):
    student = manager.add_student(make_student())
    manager.add_class(make_class())
    before = list(manager.classes)

    assert manager.enroll_student(student.student_id, "missing") is False
    assert list(manager.classes) == before


def test_mark_attendance_always_appends(manager, fixed_now):
    manager.mark_attendance("s1", "c1", True)
    manager.mark_attendance("s1", "c1", True)

    records = manager.attendance_records
    assert len(records) == 2
    assert records[0].record_id != records[1].record_id
    assert all(r.marked_at == fixed_now and r.notes == "" for r in records)


def test_get_students_for_class_uses_explicit_roster_only(manager, make_student, make_class):
    enrolled = manager.add_student(make_student("A", subjects=("Banking Law",)))
    manager.add_student(make_student("B", subjects=("Company Law",)))
    session = manager.add_class(make_class("Company Law"))
    manager.enroll_student(enrolled.student_id, session.class_id)

    assert manager.get_students_for_class(session.class_id) == [enrolled]
    assert manager.get_students_for_class("missing") == []


def test_listeners_are_notified_synchronously(manager, make_student, make_class):
    events = []
    unsubscribe = manager.subscribe(events.append)

    student = manager.add_student(make_student())
    assert [e.kind for e in events] == [ChangeKind.STUDENT_ADDED]
    assert events[0].record_id == student.student_id

    session = manager.add_class(make_class())
    manager.enroll_student(student.student_id, session.class_id)
    manager.enroll_student(student.student_id, session.class_id)
    manager.mark_attendance(student.student_id, session.class_id, False)

    assert [e.kind for e in events] == [
        ChangeKind.STUDENT_ADDED,
        ChangeKind.CLASS_ADDED,
        ChangeKind.STUDENT_ENROLLED,
        ChangeKind.ATTENDANCE_MARKED,
    ]

    unsubscribe()
    manager.add_student(make_student())
    assert len(events) == 4


def test_listener_sees_new_state(manager, make_student):
    seen = []
    manager.subscribe(lambda e: seen.append(len(manager.students)))

    manager.add_student(make_student())
    assert seen == [1]


def test_student_count_tracks_repository(manager, make_student):
    assert manager.student_count() == 0
    manager.add_student(make_student("A"))
    manager.add_student(make_student("B"))
    assert manager.student_count() == len(manager.students) == 2

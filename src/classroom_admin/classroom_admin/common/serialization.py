"""JSON-ready codec for the record types.

One plain object per record; timestamps and times are ISO-8601 strings and
identifiers are opaque strings.
"""

from __future__ import annotations

from datetime import datetime, time

from ..attendance.model import AttendanceRecord
from ..classes.model import ClassSession
from ..students.model import Student


def student_to_dict(s: Student) -> dict:
    return {
        "id": s.student_id,
        "name": s.name,
        "phone_number": s.phone_number,
        "email": s.email,
        "group": s.group,
        "enrolled_subjects": list(s.enrolled_subjects),
        "joining_date": s.joining_date.isoformat(),
        "is_active": s.is_active,
    }


def student_from_dict(d: dict) -> Student:
    return Student(
        student_id=str(d["id"]),
        name=d["name"],
        phone_number=d.get("phone_number") or "",
        email=d.get("email") or "",
        group=d["group"],
        enrolled_subjects=tuple(d.get("enrolled_subjects") or ()),
        joining_date=datetime.fromisoformat(d["joining_date"]),
        is_active=bool(d.get("is_active", True)),
    )


def class_to_dict(c: ClassSession) -> dict:
    return {
        "id": c.class_id,
        "subject": c.subject,
        "group": c.group,
        "start_time": c.start_time.isoformat(timespec="minutes"),
        "end_time": c.end_time.isoformat(timespec="minutes"),
        "day_of_week": c.day_of_week,
        "max_students": c.max_students,
        "enrolled_students": list(c.enrolled_students),
        "is_active": c.is_active,
    }


def class_from_dict(d: dict) -> ClassSession:
    return ClassSession(
        class_id=str(d["id"]),
        subject=d["subject"],
        group=d["group"],
        start_time=time.fromisoformat(d["start_time"]),
        end_time=time.fromisoformat(d["end_time"]),
        day_of_week=d["day_of_week"],
        max_students=int(d["max_students"]),
        enrolled_students=tuple(d.get("enrolled_students") or ()),
        is_active=bool(d.get("is_active", True)),
    )


def attendance_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "student_id": r.student_id,
        "class_id": r.class_id,
        "date": r.marked_at.isoformat(),
        "is_present": r.is_present,
        "notes": r.notes,
    }


def attendance_from_dict(d: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(d["id"]),
        student_id=str(d["student_id"]),
        class_id=str(d["class_id"]),
        marked_at=datetime.fromisoformat(d["date"]),
        is_present=bool(d["is_present"]),
        notes=d.get("notes") or "",
    )

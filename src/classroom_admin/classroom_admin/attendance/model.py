from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one presence mark for a student in a class.

    ``student_id`` and ``class_id`` are weak references; several records may
    exist for the same student, class and day.
    """

    record_id: str
    student_id: str
    class_id: str
    marked_at: datetime
    is_present: bool
    notes: str = ""

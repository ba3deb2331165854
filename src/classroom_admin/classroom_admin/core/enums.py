from __future__ import annotations

from enum import Enum


class ChangeKind(str, Enum):
    """Kind of mutation published by the data manager."""

    STUDENT_ADDED = "STUDENT_ADDED"
    CLASS_ADDED = "CLASS_ADDED"
    STUDENT_ENROLLED = "STUDENT_ENROLLED"
    ATTENDANCE_MARKED = "ATTENDANCE_MARKED"

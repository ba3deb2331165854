from __future__ import annotations

from ...classes.model import ClassSession
from ...students.model import Student
from .base import RosterStrategy


class EnrolledListStrategy(RosterStrategy):
    """Students listed explicitly in the class's enrolled_students."""

    def includes(self, *, session: ClassSession, student: Student) -> bool:
        return student.student_id in session.enrolled_students

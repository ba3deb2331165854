from __future__ import annotations

from ...classes.model import ClassSession
from ...students.model import Student
from .base import RosterStrategy


class SubjectMatchStrategy(RosterStrategy):
    """Students taking the class's subject, by exact name, in any group."""

    def includes(self, *, session: ClassSession, student: Student) -> bool:
        return session.subject in student.enrolled_subjects

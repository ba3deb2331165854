from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self) -> None:
        self._items: List[Student] = []
        self._by_id: Dict[str, Student] = {}

    def add(self, student: Student) -> None:
        self._items.append(student)
        self._by_id[student.student_id] = student

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._by_id.get(student_id)

    def list_all(self) -> Sequence[Student]:
        return list(self._items)

    def count(self) -> int:
        return len(self._items)

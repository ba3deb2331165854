from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence

from .model import ClassSession
from .repository import ClassRepository


class InMemoryClassRepository(ClassRepository):
    def __init__(self) -> None:
        self._items: List[ClassSession] = []

    def _index_of(self, class_id: str) -> Optional[int]:
        for i, c in enumerate(self._items):
            if c.class_id == class_id:
                return i
        return None

    def add(self, session: ClassSession) -> None:
        self._items.append(session)

    def get_by_id(self, class_id: str) -> Optional[ClassSession]:
        i = self._index_of(class_id)
        return self._items[i] if i is not None else None

    def list_all(self) -> Sequence[ClassSession]:
        return list(self._items)

    def enroll(self, *, student_id: str, class_id: str) -> bool:
        i = self._index_of(class_id)
        if i is None:
            return False

        current = self._items[i]
        if student_id in current.enrolled_students:
            return False

        self._items[i] = replace(current, enrolled_students=current.enrolled_students + (student_id,))
        return True

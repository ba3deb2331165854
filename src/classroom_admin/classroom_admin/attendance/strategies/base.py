from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ...classes.model import ClassSession
from ...students.model import Student


class RosterStrategy(ABC):
    """Strategy Pattern: encapsulate which students belong to a class roster."""

    @abstractmethod
    def includes(self, *, session: ClassSession, student: Student) -> bool:
        raise NotImplementedError

    def select(self, *, session: ClassSession, students: Sequence[Student]) -> List[Student]:
        """Filter ``students`` keeping the collection order."""
        return [s for s in students if self.includes(session=session, student=s)]

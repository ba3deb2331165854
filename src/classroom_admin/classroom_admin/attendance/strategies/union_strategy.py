from __future__ import annotations

from typing import Sequence

from ...classes.model import ClassSession
from ...students.model import Student
from .base import RosterStrategy


class UnionRosterStrategy(RosterStrategy):
    """A student is on the roster when any of the wrapped strategies includes them."""

    def __init__(self, strategies: Sequence[RosterStrategy]):
        self._strategies = tuple(strategies)

    def includes(self, *, session: ClassSession, student: Student) -> bool:
        return any(st.includes(session=session, student=student) for st in self._strategies)

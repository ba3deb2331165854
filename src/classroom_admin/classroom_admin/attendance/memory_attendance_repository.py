from __future__ import annotations

from typing import List, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Append-only store; records are never updated or removed."""

    def __init__(self) -> None:
        self._items: List[AttendanceRecord] = []

    def add(self, record: AttendanceRecord) -> None:
        self._items.append(record)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._items)

    def list_for_class(self, class_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._items if r.class_id == class_id]

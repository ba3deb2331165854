from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def add(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_class(self, class_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

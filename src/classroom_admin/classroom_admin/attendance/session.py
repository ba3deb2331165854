from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..students.model import Student
from .model import AttendanceRecord


class AttendanceMarkingSession:
    """Transient presence sheet for one class.

    Only the toggled values are held; the roster itself is recomputed from the
    data manager whenever the sheet is shown or saved, so a student who joins
    the roster later is simply absent. Saving does not look at records produced
    by earlier sessions.
    """

    def __init__(self, class_id: str, presence: Dict[str, bool] | None = None):
        self.class_id = class_id
        self._presence: Dict[str, bool] = {sid: bool(v) for sid, v in (presence or {}).items()}

    @classmethod
    def start(cls, class_id: str, roster: Sequence[Student]) -> "AttendanceMarkingSession":
        return cls(class_id, {s.student_id: False for s in roster})

    def is_present(self, student_id: str) -> bool:
        return self._presence.get(student_id, False)

    def toggle(self, student_id: str) -> bool:
        """Flip one entry; returns the new value."""
        self._presence[student_id] = not self.is_present(student_id)
        return self._presence[student_id]

    def set(self, student_id: str, present: bool) -> None:
        self._presence[student_id] = bool(present)

    def present_count(self, roster: Iterable[str]) -> int:
        return sum(1 for sid in roster if self.is_present(sid))

    def save(self, manager) -> List[AttendanceRecord]:
        """Mark attendance once per student on the current roster."""
        return [
            manager.mark_attendance(s.student_id, self.class_id, self.is_present(s.student_id))
            for s in manager.attendance_roster(self.class_id)
        ]

    def to_dict(self) -> dict:
        return {"class_id": self.class_id, "presence": dict(self._presence)}

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceMarkingSession":
        return cls(str(data["class_id"]), dict(data.get("presence") or {}))

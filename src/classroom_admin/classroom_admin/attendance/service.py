from __future__ import annotations

from typing import List

from ..core.exceptions import NotFoundError, ValidationError
from ..data_manager import ClassDataManager
from .model import AttendanceRecord
from .session import AttendanceMarkingSession


class AttendanceService:
    """Use case: pick an active class, mark presence, save the sheet.

    The roster is read live from the data manager on every call.
    """

    def __init__(self, manager: ClassDataManager):
        self._manager = manager

    def list_selectable_classes(self):
        return [c for c in self._manager.classes if c.is_active]

    def start_session(self, class_id: str) -> AttendanceMarkingSession:
        session = self._manager.get_class(class_id)
        if not session or not session.is_active:
            raise NotFoundError("Class not found")
        return AttendanceMarkingSession.start(class_id, self._manager.attendance_roster(class_id))

    def roster_ids(self, sheet: AttendanceMarkingSession) -> List[str]:
        return [s.student_id for s in self._manager.attendance_roster(sheet.class_id)]

    def toggle(self, sheet: AttendanceMarkingSession, student_id: str) -> bool:
        """Flip a roster student's mark; ids off the roster are ignored."""
        if student_id not in self.roster_ids(sheet):
            return False
        return sheet.toggle(student_id)

    def save(self, sheet: AttendanceMarkingSession) -> List[AttendanceRecord]:
        if not self._manager.attendance_roster(sheet.class_id):
            raise ValidationError("No students enrolled in this class")
        return sheet.save(self._manager)

    def get_sheet_ui(self, sheet: AttendanceMarkingSession) -> dict:
        cls = self._manager.get_class(sheet.class_id)
        rows = []
        for student in self._manager.attendance_roster(sheet.class_id):
            present = sheet.is_present(student.student_id)
            rows.append(
                {
                    "student_id": student.student_id,
                    "name": student.name,
                    "group": student.group,
                    "is_present": present,
                    "label": "Present" if present else "Absent",
                }
            )

        return {
            "class_id": sheet.class_id,
            "subject": cls.subject if cls else "-",
            "header": f"{cls.group} • {cls.day_of_week}" if cls else "-",
            "students": rows,
            "present": sum(1 for r in rows if r["is_present"]),
            "total": len(rows),
        }

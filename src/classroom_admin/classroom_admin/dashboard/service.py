from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import List, Optional

from ..classes.model import ClassSession
from ..common.datetime_utils import format_hhmm, now_local, weekday_name
from ..data_manager import ClassDataManager


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    active_classes: int
    subject_count: int
    todays_classes: int


class DashboardService:
    """Read-only views recomputed from the data manager on every call."""

    def __init__(self, manager: ClassDataManager):
        self._manager = manager

    def todays_classes(self, *, now: Optional[datetime] = None) -> List[ClassSession]:
        today = weekday_name((now or now_local()).date())
        return [c for c in self._manager.classes if c.day_of_week == today and c.is_active]

    def stats(self, *, now: Optional[datetime] = None) -> DashboardStats:
        classes = self._manager.classes
        return DashboardStats(
            total_students=self._manager.student_count(),
            active_classes=sum(1 for c in classes if c.is_active),
            # Counted over every class, active or not.
            subject_count=len({c.subject for c in classes}),
            todays_classes=len(self.todays_classes(now=now)),
        )

    def get_dashboard_ui(self, *, now: Optional[datetime] = None) -> dict:
        return {
            "stats": asdict(self.stats(now=now)),
            "today": [self.class_row_ui(c) for c in self.todays_classes(now=now)],
        }

    @staticmethod
    def class_row_ui(c: ClassSession) -> dict:
        return {
            "class_id": c.class_id,
            "subject": c.subject,
            "group": c.group,
            "day_of_week": c.day_of_week,
            "time": f"{format_hhmm(c.start_time)} - {format_hhmm(c.end_time)}",
            "capacity": f"{len(c.enrolled_students)}/{c.max_students} students",
            "is_active": c.is_active,
        }

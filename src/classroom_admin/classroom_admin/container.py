from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import RosterStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .bootstrap import load_sample_data
from .classes.memory_class_repository import InMemoryClassRepository
from .dashboard.service import DashboardService
from .data_manager import ClassDataManager
from .students.memory_student_repository import InMemoryStudentRepository


@dataclass(frozen=True)
class Container:
    students_repo: InMemoryStudentRepository
    classes_repo: InMemoryClassRepository
    attendance_repo: InMemoryAttendanceRepository

    manager: ClassDataManager
    dashboard_service: DashboardService
    attendance_service: AttendanceService


def build_container(*, load_sample: bool = False) -> Container:
    students_repo = InMemoryStudentRepository()
    classes_repo = InMemoryClassRepository()
    attendance_repo = InMemoryAttendanceRepository()

    manager = ClassDataManager(
        students_repo,
        classes_repo,
        attendance_repo,
        roster_factory=RosterStrategyFactory(),
    )
    if load_sample:
        load_sample_data(manager)

    return Container(
        students_repo=students_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        manager=manager,
        dashboard_service=DashboardService(manager),
        attendance_service=AttendanceService(manager),
    )

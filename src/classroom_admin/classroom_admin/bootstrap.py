"""Demo data loaded on startup when LOAD_SAMPLE_DATA is enabled."""

from __future__ import annotations

from datetime import time

from .classes.model import NewClassSession
from .data_manager import ClassDataManager
from .students.model import NewStudent

SAMPLE_STUDENTS = (
    NewStudent(
        name="Rahul Sharma",
        phone_number="+91-9876543210",
        email="rahul@email.com",
        group="Group 1",
        enrolled_subjects=("Company Law", "Corporate Governance"),
    ),
    NewStudent(
        name="Priya Singh",
        phone_number="+91-9876543211",
        email="priya@email.com",
        group="Group 2",
        enrolled_subjects=("Securities Laws", "Banking Law"),
    ),
    NewStudent(
        name="Amit Kumar",
        phone_number="+91-9876543212",
        email="amit@email.com",
        group="Group 1",
        enrolled_subjects=("Company Law", "Economics & Statistics"),
    ),
)

SAMPLE_CLASSES = (
    NewClassSession(
        subject="Company Law",
        group="Group 1",
        start_time=time(9, 0),
        end_time=time(10, 30),
        day_of_week="Monday",
        max_students=20,
    ),
    NewClassSession(
        subject="Corporate Governance",
        group="Group 1",
        start_time=time(11, 0),
        end_time=time(12, 30),
        day_of_week="Monday",
        max_students=15,
    ),
    NewClassSession(
        subject="Securities Laws",
        group="Group 2",
        start_time=time(14, 0),
        end_time=time(15, 30),
        day_of_week="Tuesday",
        max_students=18,
    ),
)


def load_sample_data(manager: ClassDataManager) -> None:
    for s in SAMPLE_STUDENTS:
        manager.add_student(s)
    for c in SAMPLE_CLASSES:
        manager.add_class(c)

from __future__ import annotations

from datetime import datetime, time

import pytest

from src.classroom_admin.classroom_admin.classes.model import NewClassSession
from src.classroom_admin.classroom_admin.data_manager import ClassDataManager
from src.classroom_admin.classroom_admin.students.model import NewStudent


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def manager(fixed_now) -> ClassDataManager:
    return ClassDataManager(clock=lambda: fixed_now)


@pytest.fixture
def make_student():
    def _make(name: str = "A", group: str = "Group 1", subjects=("Company Law",)) -> NewStudent:
        return NewStudent(
            name=name,
            phone_number="+91-000",
            email=f"{name.lower()}@email.com",
            group=group,
            enrolled_subjects=tuple(subjects),
        )

    return _make


@pytest.fixture
def make_class():
    def _make(subject: str = "Company Law", group: str = "Group 1", day: str = "Monday", *, active: bool = True) -> NewClassSession:
        return NewClassSession(
            subject=subject,
            group=group,
            start_time=time(9, 0),
            end_time=time(10, 30),
            day_of_week=day,
            max_students=20,
            is_active=active,
        )

    return _make

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Student:
    """Domain entity: a student.

    Note: plain data object, it holds no reference to the repository.
    """

    student_id: str
    name: str
    phone_number: str
    email: str
    group: str
    enrolled_subjects: Tuple[str, ...]
    joining_date: datetime
    is_active: bool = True


@dataclass(frozen=True)
class NewStudent:
    """Fields supplied by the caller when adding a student."""

    name: str
    phone_number: str
    email: str
    group: str
    enrolled_subjects: Tuple[str, ...]
    joining_date: Optional[datetime] = None
    is_active: bool = True

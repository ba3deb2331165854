from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Tuple


@dataclass(frozen=True)
class ClassSession:
    """Domain entity: one recurring weekly class meeting.

    Nothing checks that ``enrolled_students`` stays within ``max_students``
    or that ``start_time`` precedes ``end_time``.
    """

    class_id: str
    subject: str
    group: str
    start_time: time
    end_time: time
    day_of_week: str
    max_students: int
    enrolled_students: Tuple[str, ...] = ()
    is_active: bool = True


@dataclass(frozen=True)
class NewClassSession:
    subject: str
    group: str
    start_time: time
    end_time: time
    day_of_week: str
    max_students: int
    is_active: bool = True

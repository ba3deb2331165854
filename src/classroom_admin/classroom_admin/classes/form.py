from __future__ import annotations

from datetime import time

from ..catalog.subjects import list_groups, subjects_for
from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_mapping, require_one_of
from ..core.constants import DEFAULT_DAY, DEFAULT_GROUP, DEFAULT_MAX_STUDENTS, MAX_MAX_STUDENTS, MIN_MAX_STUDENTS, WEEK_DAYS
from ..core.exceptions import ValidationError
from .model import NewClassSession


class ClassForm:
    """Entry state for a new class session.

    Switching group resets the subject to the new group's first subject.
    """

    def __init__(self, *, group: str = DEFAULT_GROUP, start_time: time, end_time: time):
        self.group = require_one_of(group, list_groups(), "Group")
        self.subject = self._first_subject()
        self.day_of_week = DEFAULT_DAY
        self.start_time = start_time
        self.end_time = end_time
        self.max_students = DEFAULT_MAX_STUDENTS

    def _first_subject(self) -> str:
        subjects = subjects_for(self.group)
        return subjects[0] if subjects else ""

    @property
    def available_subjects(self):
        return subjects_for(self.group)

    def set_group(self, group: str) -> None:
        self.group = require_one_of(group, list_groups(), "Group")
        self.subject = self._first_subject()

    def set_subject(self, subject: str) -> None:
        self.subject = require_one_of(subject, self.available_subjects, "Subject")

    def set_day(self, day: str) -> None:
        self.day_of_week = require_one_of(day, WEEK_DAYS, "Day")

    def set_max_students(self, value: int) -> None:
        # Same bounds as the capacity stepper.
        self.max_students = max(MIN_MAX_STUDENTS, min(MAX_MAX_STUDENTS, int(value)))

    def build(self) -> NewClassSession:
        return NewClassSession(
            subject=self.subject,
            group=self.group,
            start_time=self.start_time,
            end_time=self.end_time,
            day_of_week=self.day_of_week,
            max_students=self.max_students,
        )

    @classmethod
    def from_payload(cls, data: dict) -> "ClassForm":
        data = require_mapping(data)
        try:
            start = parse_hhmm(str(data["start_time"]))
            end = parse_hhmm(str(data["end_time"]))
        except KeyError as e:
            raise ValidationError(f"{e.args[0]} is required")

        form = cls(group=str(data.get("group") or DEFAULT_GROUP), start_time=start, end_time=end)
        if data.get("subject"):
            form.set_subject(str(data["subject"]))
        if data.get("day_of_week"):
            form.set_day(str(data["day_of_week"]))
        if data.get("max_students") is not None:
            try:
                form.set_max_students(int(data["max_students"]))
            except (TypeError, ValueError, OverflowError):
                raise ValidationError("max_students must be an integer")
        return form

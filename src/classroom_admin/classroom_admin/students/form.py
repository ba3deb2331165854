from __future__ import annotations

from datetime import datetime
from typing import Optional, Set

from ..catalog.subjects import list_groups, subjects_for
from ..common.validators import require_any, require_mapping, require_non_empty, require_one_of
from ..core.constants import DEFAULT_GROUP
from ..core.exceptions import ValidationError
from .model import NewStudent


class StudentForm:
    """Entry state for a new student.

    Submit is allowed only with a non-empty name and at least one subject;
    the data layer itself accepts anything.
    """

    def __init__(self, *, name: str = "", phone_number: str = "", email: str = "", group: str = DEFAULT_GROUP):
        self.name = name
        self.phone_number = phone_number
        self.email = email
        self.group = require_one_of(group, list_groups(), "Group")
        self._selected: Set[str] = set()

    @property
    def available_subjects(self):
        return subjects_for(self.group)

    @property
    def selected_subjects(self) -> Set[str]:
        return set(self._selected)

    def set_group(self, group: str) -> None:
        group = require_one_of(group, list_groups(), "Group")
        if group != self.group:
            self._selected.clear()
        self.group = group

    def toggle_subject(self, subject: str) -> bool:
        if subject not in self.available_subjects:
            raise ValidationError(f"{subject!r} is not offered for {self.group}")
        if subject in self._selected:
            self._selected.remove(subject)
            return False
        self._selected.add(subject)
        return True

    @property
    def can_submit(self) -> bool:
        return bool(self.name.strip()) and bool(self._selected)

    def build(self, *, joining_date: Optional[datetime] = None) -> NewStudent:
        name = require_non_empty(self.name, "Name")
        require_any(self._selected, "subject")
        ordered = tuple(s for s in self.available_subjects if s in self._selected)
        return NewStudent(
            name=name,
            phone_number=self.phone_number.strip(),
            email=self.email.strip(),
            group=self.group,
            enrolled_subjects=ordered,
            joining_date=joining_date,
        )

    @classmethod
    def from_payload(cls, data: dict) -> "StudentForm":
        data = require_mapping(data)
        form = cls(
            name=str(data.get("name") or ""),
            phone_number=str(data.get("phone_number") or ""),
            email=str(data.get("email") or ""),
            group=str(data.get("group") or DEFAULT_GROUP),
        )
        subjects = data.get("subjects") or []
        if not isinstance(subjects, list):
            raise ValidationError("subjects must be a list")
        for subject in map(str, subjects):
            if subject not in form.selected_subjects:
                form.toggle_subject(subject)
        return form

from datetime import time

import pytest

from src.classroom_admin.classroom_admin.classes.form import ClassForm
from src.classroom_admin.classroom_admin.core.exceptions import ValidationError


def test_defaults():
    form = ClassForm(start_time=time(9, 0), end_time=time(10, 0))
    assert form.group == "Group 1"
    assert form.subject == "Company Law"
    assert form.day_of_week == "Monday"
    assert form.max_students == 20


def test_group_switch_resets_subject():
    form = ClassForm(start_time=time(9, 0), end_time=time(10, 0))
    form.set_subject("Financial Accounting")
    form.set_group("Group 2")
    assert form.subject == "Securities Laws"


def test_capacity_is_clamped():
    form = ClassForm(start_time=time(9, 0), end_time=time(10, 0))
    form.set_max_students(0)
    assert form.max_students == 1
    form.set_max_students(99)
    assert form.max_students == 50


def test_end_before_start_is_accepted():
    form = ClassForm.from_payload({"start_time": "11:00", "end_time": "10:00"})
    built = form.build()
    assert built.start_time == time(11, 0)
    assert built.end_time == time(10, 0)


@pytest.mark.parametrize(
    "payload",
    [
        {"end_time": "10:00"},
        {"start_time": "9am", "end_time": "10:00"},
        {"start_time": "09:00", "end_time": "10:00", "day_of_week": "Funday"},
        {"start_time": "09:00", "end_time": "10:00", "subject": "Banking Law"},
    ],
)
def test_invalid_payload_raises(payload):
    with pytest.raises(ValidationError):
        ClassForm.from_payload(payload)


@pytest.mark.parametrize("capacity", [float("inf"), "many", [20]])
def test_bad_capacity_raises(capacity):
    with pytest.raises(ValidationError):
        ClassForm.from_payload({"start_time": "09:00", "end_time": "10:00", "max_students": capacity})


def test_non_object_payload_raises():
    with pytest.raises(ValidationError):
        ClassForm.from_payload(["09:00", "10:00"])

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from .attendance.factory import RosterStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.model import AttendanceRecord
from .attendance.repository import AttendanceRepository
from .classes.memory_class_repository import InMemoryClassRepository
from .classes.model import ClassSession, NewClassSession
from .classes.repository import ClassRepository
from .common.datetime_utils import now_local
from .common.ids import new_id
from .common.observable import ChangeEvent, Observable
from .core.enums import ChangeKind
from .students.memory_student_repository import InMemoryStudentRepository
from .students.model import NewStudent, Student
from .students.repository import StudentRepository

logger = logging.getLogger(__name__)


class ClassDataManager(Observable):
    """Sole authoritative store for students, classes and attendance records.

    Every operation is total: unknown identifiers give empty results or no-ops.
    Subscribers are notified synchronously after each mutation.
    """

    def __init__(
        self,
        students: StudentRepository | None = None,
        classes: ClassRepository | None = None,
        attendance: AttendanceRepository | None = None,
        *,
        roster_factory: RosterStrategyFactory | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        super().__init__()
        self._students = students if students is not None else InMemoryStudentRepository()
        self._classes = classes if classes is not None else InMemoryClassRepository()
        self._attendance = attendance if attendance is not None else InMemoryAttendanceRepository()
        self._factory = roster_factory or RosterStrategyFactory()
        self._clock = clock

    @property
    def students(self) -> Sequence[Student]:
        return self._students.list_all()

    @property
    def classes(self) -> Sequence[ClassSession]:
        return self._classes.list_all()

    @property
    def attendance_records(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def student_count(self) -> int:
        return self._students.count()

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def get_class(self, class_id: str) -> Optional[ClassSession]:
        return self._classes.get_by_id(class_id)

    def add_student(self, new_student: NewStudent) -> Student:
        student = Student(
            student_id=new_id(),
            name=new_student.name,
            phone_number=new_student.phone_number,
            email=new_student.email,
            group=new_student.group,
            enrolled_subjects=tuple(new_student.enrolled_subjects),
            joining_date=new_student.joining_date or self._clock(),
            is_active=new_student.is_active,
        )
        self._students.add(student)
        logger.info("student added id=%s group=%s", student.student_id, student.group)
        self._notify(ChangeEvent(ChangeKind.STUDENT_ADDED, student.student_id))
        return student

    def add_class(self, new_session: NewClassSession) -> ClassSession:
        session = ClassSession(
            class_id=new_id(),
            subject=new_session.subject,
            group=new_session.group,
            start_time=new_session.start_time,
            end_time=new_session.end_time,
            day_of_week=new_session.day_of_week,
            max_students=new_session.max_students,
            is_active=new_session.is_active,
        )
        self._classes.add(session)
        logger.info("class added id=%s subject=%s day=%s", session.class_id, session.subject, session.day_of_week)
        self._notify(ChangeEvent(ChangeKind.CLASS_ADDED, session.class_id))
        return session

    def mark_attendance(self, student_id: str, class_id: str, is_present: bool, *, notes: str = "") -> AttendanceRecord:
        # No existence check on either id; duplicates are kept.
        record = AttendanceRecord(
            record_id=new_id(),
            student_id=student_id,
            class_id=class_id,
            marked_at=self._clock(),
            is_present=bool(is_present),
            notes=notes,
        )
        self._attendance.add(record)
        logger.info("attendance marked student=%s class=%s present=%s", student_id, class_id, record.is_present)
        self._notify(ChangeEvent(ChangeKind.ATTENDANCE_MARKED, record.record_id))
        return record

    def enroll_student(self, student_id: str, class_id: str) -> bool:
        changed = self._classes.enroll(student_id=student_id, class_id=class_id)
        if changed:
            logger.info("student %s enrolled in class %s", student_id, class_id)
            self._notify(ChangeEvent(ChangeKind.STUDENT_ENROLLED, class_id))
        return changed

    def get_students_for_class(self, class_id: str) -> List[Student]:
        session = self._classes.get_by_id(class_id)
        if not session:
            return []
        return self._factory.for_class_roster().select(session=session, students=self.students)

    def attendance_roster(self, class_id: str) -> List[Student]:
        """Students considered enrolled for marking attendance.

        Union of the explicit roster and every student whose subjects contain
        the class subject, regardless of group or schedule.
        """
        session = self._classes.get_by_id(class_id)
        if not session:
            return []
        return self._factory.for_attendance().select(session=session, students=self.students)

    def attendance_for_class(self, class_id: str) -> List[AttendanceRecord]:
        return list(self._attendance.list_for_class(class_id))

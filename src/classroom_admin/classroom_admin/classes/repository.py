from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassSession


class ClassRepository(Protocol):
    def add(self, session: ClassSession) -> None:
        raise NotImplementedError

    def get_by_id(self, class_id: str) -> Optional[ClassSession]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ClassSession]:
        raise NotImplementedError

    def enroll(self, *, student_id: str, class_id: str) -> bool:
        """Append student_id to the class roster unless already present.

        Returns True only when the roster changed.
        """

        raise NotImplementedError

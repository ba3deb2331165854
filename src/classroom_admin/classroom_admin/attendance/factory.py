from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import RosterStrategy
from .strategies.enrolled_strategy import EnrolledListStrategy
from .strategies.subject_strategy import SubjectMatchStrategy
from .strategies.union_strategy import UnionRosterStrategy


@dataclass
class RosterStrategyFactory:
    """Factory Pattern: choose how a roster is computed for each use."""

    def for_class_roster(self) -> RosterStrategy:
        return EnrolledListStrategy()

    def for_attendance(self) -> RosterStrategy:
        # Explicit enrollment and subject-name membership are kept as two
        # separate notions; attendance takes their union.
        return UnionRosterStrategy([EnrolledListStrategy(), SubjectMatchStrategy()])

"""Fixed subject table per group.

Selecting a group for a student or a class restricts subject choices to that
group's list.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

SUBJECTS_BY_GROUP: Dict[str, Tuple[str, ...]] = {
    "Group 1": (
        "Company Law",
        "Corporate Governance",
        "Economics & Statistics",
        "Financial Accounting",
    ),
    "Group 2": (
        "Securities Laws",
        "Banking Law",
        "Insurance Law",
        "Foreign Exchange Management",
        "Corporate Restructuring",
    ),
}


def list_groups() -> List[str]:
    return list(SUBJECTS_BY_GROUP)


def subjects_for(group: str) -> List[str]:
    """Ordered subjects offered to ``group``; empty for an unknown group."""
    return list(SUBJECTS_BY_GROUP.get(group, ()))

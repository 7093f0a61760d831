"""Data models for the team roles simulation.

Levels are kept as plain strings (not an Enum) so role detail text reads
exactly as entered, e.g. "Experience: Senior".
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

LEVELS: Tuple[str, ...] = ("Intern", "Junior", "Middle", "Senior")
ROLE_KEYWORDS: Tuple[str, ...] = ("Designer", "Developer", "Tester")

@dataclass
class Assignee:
    """A task's reference to one role.

    Fields:
        description: Formatted role details (name, role label, level).
        status: Latest work reported for this assignee (None until updated).
    """
    description: str
    status: Optional[str] = None

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        first_line = self.description.split('\n', 1)[0]
        return f"Assignee({first_line}, status={self.status})"

"""Plain-text rendering of assignee groups and timestamps.

Output is uncoloured so it can be compared verbatim; section titles get
their styling from theme at print time.
"""
from datetime import datetime
from typing import Iterable, List, Sequence
from models import Assignee

BORDER = '=' * 23
DIVIDER = '-' * 23


class Formatter:
    @staticmethod
    def format_assignees(assignees: Sequence[Assignee], roles: Iterable[str]) -> str:
        """Render one bordered block per role keyword.

        An assignee is listed under every keyword its description contains,
        so a single record may show up in several blocks. Keywords with no
        match still render their header and borders.
        """
        blocks: List[str] = []
        for role in roles:
            entries = [Formatter._format_entry(a) for a in assignees if role in a.description]
            body = f"\n{DIVIDER}\n".join(entries)
            blocks.append(f"Assigned {role}(s):\n{BORDER}\n{body}\n{BORDER}")
        return '\n'.join(blocks)

    @staticmethod
    def _format_entry(assignee: Assignee) -> str:
        if assignee.status:
            return f"{assignee.description}\nStatus: {assignee.status}"
        return assignee.description

    @staticmethod
    def format_date(date: datetime) -> str:
        """Long US form, e.g. 'October 24, 2024 at 3:05 PM'."""
        hour = date.hour % 12 or 12
        meridiem = 'AM' if date.hour < 12 else 'PM'
        return f"{date:%B} {date.day}, {date.year} at {hour}:{date.minute:02d} {meridiem}"

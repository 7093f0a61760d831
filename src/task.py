"""Task: a named date range with an ordered, append-only list of assignees."""
import logging
from typing import List
from formatter import Formatter, BORDER
from models import Assignee, ROLE_KEYWORDS
from theme import color, TITLE_COLOR

logger = logging.getLogger(__name__)


class Task:
    def __init__(self, task_name: str, start_date: str, end_date: str):
        self.task_name = task_name
        # dates are free-form labels, never parsed
        self.start_date = start_date
        self.end_date = end_date
        self.assignees: List[Assignee] = []

    def add_task_description(self, assignee: str) -> None:
        self.assignees.append(Assignee(description=assignee))
        logger.debug("Task %s: assignee #%d added", self.task_name, len(self.assignees))

    def render_block(self, title: str) -> str:
        """Header lines plus grouped assignees, shared with Report."""
        return (f"\n{title}\nTask: {self.task_name}\nStart Date: {self.start_date}\n"
                f"End Date: {self.end_date}\n{BORDER}\n"
                f"{Formatter.format_assignees(self.assignees, ROLE_KEYWORDS)}")

    def details(self) -> str:
        return self.render_block("TASK DETAILS") + "\n\n"

    def get_task_details(self) -> None:
        print(self.render_block(color("TASK DETAILS", TITLE_COLOR)) + "\n\n")

    def __str__(self) -> str:
        return f'{self.task_name} ({self.start_date} - {self.end_date}): {len(self.assignees)} assignees'

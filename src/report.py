"""Status reporting over a single Task."""
import logging
from datetime import datetime
from typing import Optional
from formatter import Formatter
from task import Task
from theme import color, TITLE_COLOR

logger = logging.getLogger(__name__)


class Report:
    def __init__(self, task: Task, report_date: Optional[datetime] = None):
        self.task = task
        self.report_date: datetime = report_date or datetime.now()

    def update_report(self, assignee: str, status: str) -> int:
        """Set ``status`` on every assignee whose description equals ``assignee``.

        Matching is by exact text, so identical descriptions are all updated.
        Returns the number of records changed.
        """
        updated = 0
        for item in self.task.assignees:
            if item.description == assignee:
                item.status = status
                updated += 1
        if updated:
            logger.debug("Task %s: %d assignee(s) now %r", self.task.task_name, updated, status)
        else:
            logger.warning("Task %s: no assignee matches %r", self.task.task_name, assignee.split('\n', 1)[0])
        return updated

    def _footer(self) -> str:
        return f"\nReported at: {Formatter.format_date(self.report_date)}\n\n"

    def details(self) -> str:
        return self.task.render_block("REPORT DETAILS") + self._footer()

    def get_report_details(self) -> None:
        print(self.task.render_block(color("REPORT DETAILS", TITLE_COLOR)) + self._footer())

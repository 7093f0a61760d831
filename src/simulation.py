"""Scripted team scenario: introductions, task assignment, status report.

Logging is configured from the environment:
    TEAM_VERBOSE=1   debug output on stderr
    TEAM_QUIET=1     errors only
"""
import logging
import os
from typing import List, Optional
from report import Report
from roles import BackEnd, FrontEnd, FullStack, QaTester, Role, UiUxDesigner
from task import Task

logger = logging.getLogger(__name__)


def _truthy_env(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


class Simulation:
    def __init__(self, task_name: str = "Homepage", start_date: str = "24-10-2024",
                 end_date: str = "31-10-2024", member_name: str = "John Doe"):
        self.task_name = task_name
        self.start_date = start_date
        self.end_date = end_date
        self.member_name = member_name
        self.verbose: bool = _truthy_env(os.getenv("TEAM_VERBOSE"))
        self.quiet: bool = _truthy_env(os.getenv("TEAM_QUIET"))

    def build_team(self):
        name = self.member_name
        return (FrontEnd(name, "Senior"), BackEnd(name, "Senior"), FullStack(name, "Senior"),
                UiUxDesigner(name, "Junior"), QaTester(name, "Senior"))

    def run(self) -> Report:
        """Run the scenario top to bottom and return the finished report."""
        front, back, full, designer, tester = team = self.build_team()
        self.introduce_all(list(team))

        task = Task(self.task_name, self.start_date, self.end_date)
        details: List[str] = [member.role_details for member in team]
        for text in details:
            task.add_task_description(text)
        task.get_task_details()

        report = Report(task)
        work = [front.create_ui(), back.create_db(), full.create_ux(),
                designer.create_wireframes(), tester.run_integration_tests()]
        for text, status in zip(details, work):
            report.update_report(text, status)
        report.get_report_details()
        logger.debug("Reported %s with %d assignees", task.task_name, len(task.assignees))
        return report

    @staticmethod
    def introduce_all(members: List[Role]) -> None:
        for member in members:
            member.introduce()

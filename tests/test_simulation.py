"""End-to-end tests for the scripted scenario and logging setup."""

import logging

import pytest

import main
from logging_config import ROOT_LOGGERS, setup_logging
from simulation import Simulation, _truthy_env


@pytest.fixture
def restore_loggers():
    saved = {}
    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers), logger.propagate)
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers[:] = handlers
        logger.propagate = propagate


def test_run_prints_introductions_task_and_report(capsys):
    report = Simulation().run()
    out = capsys.readouterr().out
    assert out.count("Hi, my name is John Doe") == 5
    assert "TASK DETAILS" in out
    assert "REPORT DETAILS" in out
    assert "Reported at: " in out
    assert out.index("TASK DETAILS") < out.index("REPORT DETAILS")
    assert len(report.task.assignees) == 5


def test_run_gives_each_assignee_its_own_status(capsys):
    report = Simulation(task_name="Checkout", member_name="Ann").run()
    capsys.readouterr()
    statuses = {a.description.split("\n")[1]: a.status for a in report.task.assignees}
    assert statuses == {
        "Role: FrontEnd Developer": "Implement UI Components",
        "Role: BackEnd Developer": "Create Database",
        "Role: FullStack Developer": "Implement User Interactions",
        "Role: UI/UX Designer": "Create Wireframes",
        "Role: QA Tester": "Run Integration Tests",
    }
    assert report.task.task_name == "Checkout"


def test_designer_is_junior_in_sample_team():
    levels = {member.role: member.level for member in Simulation().build_team()}
    assert levels["UI/UX Designer"] == "Junior"
    assert levels["QA Tester"] == "Senior"


@pytest.mark.parametrize(
    "raw, expected",
    [(None, False), ("1", True), ("yes", True), ("0", False), ("off", False), ("", False)],
)
def test_truthy_env(raw, expected):
    assert _truthy_env(raw) is expected


def test_env_selects_logging_mode(monkeypatch):
    monkeypatch.setenv("TEAM_VERBOSE", "1")
    monkeypatch.delenv("TEAM_QUIET", raising=False)
    sim = Simulation()
    assert sim.verbose is True
    assert sim.quiet is False


@pytest.mark.parametrize(
    "verbose, quiet, level",
    [(False, False, logging.WARNING), (True, False, logging.DEBUG), (False, True, logging.ERROR)],
)
def test_setup_logging_levels(restore_loggers, verbose, quiet, level):
    logger = setup_logging(verbose=verbose, quiet=quiet)
    assert logger.name == "simulation"
    for name in ROOT_LOGGERS:
        assert logging.getLogger(name).level == level
        assert len(logging.getLogger(name).handlers) == 1


def test_main_runs_scenario(restore_loggers, monkeypatch, capsys):
    monkeypatch.delenv("TEAM_VERBOSE", raising=False)
    monkeypatch.setenv("TEAM_QUIET", "1")
    main.main()
    out = capsys.readouterr().out
    assert "REPORT DETAILS" in out

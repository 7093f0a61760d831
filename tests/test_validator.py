"""Tests for the membership validator."""

import logging

import pytest

from validator import InvalidValueError, Validator


def test_allowed_value_runs_action():
    calls = []
    Validator.validate("b", ["a", "b"], lambda: calls.append(True))
    assert calls == [True]


def test_rejected_value_skips_action_and_lists_allowed():
    calls = []
    with pytest.raises(InvalidValueError) as exc_info:
        Validator.validate("z", ("a", "b"), lambda: calls.append(True))
    assert calls == []
    assert str(exc_info.value) == "Invalid value. Allowed values: a, b"
    assert exc_info.value.value == "z"
    assert exc_info.value.allowed_values == ("a", "b")


def test_invalid_value_is_a_value_error():
    with pytest.raises(ValueError):
        Validator.validate(3, (1, 2), lambda: None)


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="validator"):
        with pytest.raises(InvalidValueError):
            Validator.validate("Lead", ("Junior",), lambda: None)
    assert "Lead" in caplog.text

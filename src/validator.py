"""Membership validation used by role setters."""
import logging
from typing import Any, Callable, Collection

logger = logging.getLogger(__name__)


class InvalidValueError(ValueError):
    """Raised when a value is outside its allowed set."""

    def __init__(self, value: Any, allowed_values: Collection[Any]):
        self.value = value
        self.allowed_values = tuple(allowed_values)
        allowed = ', '.join(str(v) for v in self.allowed_values)
        super().__init__(f"Invalid value. Allowed values: {allowed}")


class Validator:
    @staticmethod
    def validate(value: Any, allowed_values: Collection[Any], action: Callable[[], None]) -> None:
        """Run ``action`` if ``value`` is allowed, else raise InvalidValueError."""
        if value in allowed_values:
            action()
            return
        logger.warning("Rejected value %r (allowed: %s)", value, ', '.join(map(str, allowed_values)))
        raise InvalidValueError(value, allowed_values)

"""Assertion failures raised by harness verifiers."""

from __future__ import annotations

from typing import Any

_UNSET = object()


class AssertionFailure(AssertionError):
    """A structural expectation about remote resources was violated.

    Subclasses AssertionError so test runners report it as a test failure.

    Attributes:
        message: Context label describing what was compared
        expected: Expected value, if the failure compares two values
        actual: Observed value, if the failure compares two values
    """

    def __init__(self, message: str, expected: Any = _UNSET, actual: Any = _UNSET) -> None:
        self.message = message
        self.has_values = expected is not _UNSET or actual is not _UNSET
        self.expected = None if expected is _UNSET else expected
        self.actual = None if actual is _UNSET else actual
        super().__init__(self._format())

    def _format(self) -> str:
        if not self.has_values:
            return self.message
        prefix = f"{self.message} " if self.message else ""
        return f"{prefix}expected:<{self.expected!r}> but was:<{self.actual!r}>"


def assert_equal(message: str, expected: Any, actual: Any) -> None:
    """Raise AssertionFailure unless ``expected == actual``."""
    if expected != actual:
        raise AssertionFailure(message, expected, actual)


def assert_true(message: str, condition: bool) -> None:
    """Raise AssertionFailure carrying ``message`` unless ``condition`` holds."""
    if not condition:
        raise AssertionFailure(message)

"""Approximate timestamp comparison.

Remote timestamps drift from local ones by clock skew and network delay, and
the service has been observed to misreport them by a whole timezone offset.
Comparison is therefore two-staged: a direct tolerance check, then the same
tolerance applied after removing the known offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from .errors import AssertionFailure

DEFAULT_SKEW = timedelta(seconds=30)
DEFAULT_OFFSET_CORRECTION = timedelta(hours=8)


@dataclass(frozen=True)
class DateTolerance:
    """Tolerance policy for approximate timestamp equality.

    Attributes:
        skew: Largest difference treated as equal
        offset_correction: Misreported offset to subtract before a second
            check, None to disable the second check
    """

    skew: timedelta = DEFAULT_SKEW
    offset_correction: Optional[timedelta] = DEFAULT_OFFSET_CORRECTION

    def __post_init__(self) -> None:
        if self.skew < timedelta(0):
            raise ValueError(f"skew cannot be negative: {self.skew}")


DEFAULT_TOLERANCE = DateTolerance()


def approx_equal(
    expected: Optional[datetime],
    actual: Optional[datetime],
    tolerance: DateTolerance = DEFAULT_TOLERANCE,
) -> bool:
    """Check whether two timestamps are close enough to be considered equal.

    Absent timestamps are equal only to each other. When exactly one timestamp
    is timezone-aware the naive one is taken as UTC.
    """
    if expected is None or actual is None:
        return expected is None and actual is None

    expected, actual = _comparable(expected, actual)
    diff = abs(expected - actual)

    if diff > tolerance.skew and tolerance.offset_correction is not None:
        diff = abs(diff - tolerance.offset_correction)

    return diff <= tolerance.skew


def assert_date_approx_equal(
    expected: Optional[datetime],
    actual: Optional[datetime],
    message: str = "",
    tolerance: DateTolerance = DEFAULT_TOLERANCE,
) -> None:
    """Assert two timestamps are approximately equal.

    Raises:
        AssertionFailure: With the original expected and actual values when
            the timestamps differ beyond tolerance
    """
    if not approx_equal(expected, actual, tolerance):
        raise AssertionFailure(message, expected, actual)


def _comparable(expected: datetime, actual: datetime) -> tuple[datetime, datetime]:
    expected_aware = expected.tzinfo is not None
    actual_aware = actual.tzinfo is not None
    if expected_aware and not actual_aware:
        actual = actual.replace(tzinfo=timezone.utc)
    elif actual_aware and not expected_aware:
        expected = expected.replace(tzinfo=timezone.utc)
    return expected, actual

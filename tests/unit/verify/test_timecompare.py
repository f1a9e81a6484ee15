"""Unit tests for approximate timestamp comparison."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from media_harness.verify.errors import AssertionFailure
from media_harness.verify.timecompare import DateTolerance, approx_equal, assert_date_approx_equal

BASE = datetime(2026, 10, 17, 12, 0, 0)
EIGHT_HOURS = timedelta(hours=8)


class TestApproxEqual:
    """Tests for approx_equal."""

    def test_both_absent_are_equal(self) -> None:
        """Test two absent timestamps compare equal."""
        assert approx_equal(None, None) is True

    @pytest.mark.parametrize("expected, actual", [(BASE, None), (None, BASE)])
    def test_one_absent_is_not_equal(self, expected, actual) -> None:
        """Test exactly one absent timestamp never compares equal."""
        assert approx_equal(expected, actual) is False

    @pytest.mark.parametrize("delta_ms", [0, 1, 29_999, 30_000, -30_000])
    def test_within_skew_is_equal(self, delta_ms: int) -> None:
        """Test differences up to and including 30s are equal."""
        assert approx_equal(BASE, BASE + timedelta(milliseconds=delta_ms)) is True

    def test_just_beyond_skew_is_not_equal(self) -> None:
        """Test a difference of 30.001s is not equal."""
        assert approx_equal(BASE, BASE + timedelta(milliseconds=30_001)) is False

    @pytest.mark.parametrize("delta", [EIGHT_HOURS, -EIGHT_HOURS, EIGHT_HOURS + timedelta(seconds=30)])
    def test_timezone_offset_is_corrected(self, delta: timedelta) -> None:
        """Test differences within 30s of 8 hours are equal."""
        assert approx_equal(BASE, BASE + delta) is True

    def test_timezone_offset_correction_respects_skew(self) -> None:
        """Test 8 hours plus more than 30s is not equal."""
        assert approx_equal(BASE, BASE + EIGHT_HOURS + timedelta(seconds=31)) is False

    @pytest.mark.parametrize("delta", [timedelta(minutes=5), timedelta(hours=4), timedelta(hours=16)])
    def test_other_differences_are_not_equal(self, delta: timedelta) -> None:
        """Test differences near neither zero nor 8 hours are not equal."""
        assert approx_equal(BASE, BASE + delta) is False

    def test_disabled_offset_correction(self) -> None:
        """Test the second stage can be disabled."""
        tolerance = DateTolerance(offset_correction=None)

        assert approx_equal(BASE, BASE + EIGHT_HOURS, tolerance) is False
        assert approx_equal(BASE, BASE + timedelta(seconds=10), tolerance) is True

    def test_custom_skew_and_offset(self) -> None:
        """Test custom skew and offset correction are honored."""
        tolerance = DateTolerance(skew=timedelta(seconds=1), offset_correction=timedelta(hours=1))

        assert approx_equal(BASE, BASE + timedelta(seconds=2), tolerance) is False
        assert approx_equal(BASE, BASE + timedelta(hours=1, milliseconds=500), tolerance) is True

    def test_naive_and_aware_timestamps_compare_as_utc(self) -> None:
        """Test a naive timestamp is taken as UTC against an aware one."""
        aware = BASE.replace(tzinfo=timezone.utc)

        assert approx_equal(BASE, aware) is True
        assert approx_equal(aware + timedelta(minutes=1), BASE) is False

    def test_negative_skew_rejected(self) -> None:
        """Test a negative skew is rejected."""
        with pytest.raises(ValueError, match="skew cannot be negative"):
            DateTolerance(skew=timedelta(seconds=-1))


class TestAssertDateApproxEqual:
    """Tests for assert_date_approx_equal."""

    def test_passes_within_tolerance(self) -> None:
        """Test no failure within tolerance."""
        assert_date_approx_equal(BASE, BASE + timedelta(seconds=5), "created")

    def test_failure_reports_original_values(self) -> None:
        """Test failure carries the message and the unadjusted timestamps."""
        actual = BASE + timedelta(hours=2)

        with pytest.raises(AssertionFailure) as exc_info:
            assert_date_approx_equal(BASE, actual, "asset created")

        assert exc_info.value.message == "asset created"
        assert exc_info.value.expected == BASE
        assert exc_info.value.actual == actual
        assert "asset created" in str(exc_info.value)

    def test_failure_when_one_absent(self) -> None:
        """Test failure when only the actual timestamp is absent."""
        with pytest.raises(AssertionFailure) as exc_info:
            assert_date_approx_equal(BASE, None)

        assert exc_info.value.actual is None

    def test_failure_is_an_assertion_error(self) -> None:
        """Test failures are reported as ordinary assertion errors."""
        with pytest.raises(AssertionError):
            assert_date_approx_equal(BASE, BASE + timedelta(days=1))

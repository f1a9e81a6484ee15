"""Tests for CleanupPassResult and CleanupReport models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from media_harness.models.cleanup_report import CleanupPassResult, CleanupReport, ReportStatus
from media_harness.models.deletion_record import CleanupStage, DeletionRecord, DeletionStatus
from media_harness.models.resource_info import ResourceKind

STARTED = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def succeeded(kind: ResourceKind, resource_id: str) -> DeletionRecord:
    return DeletionRecord(kind, resource_id, CleanupStage.DELETE, DeletionStatus.SUCCEEDED, STARTED)


def failed(kind: ResourceKind, resource_id: str, stage: CleanupStage = CleanupStage.DELETE) -> DeletionRecord:
    return DeletionRecord.from_error(kind, resource_id, stage, RuntimeError("boom"), STARTED)


class TestCleanupPassResult:
    """Tests for CleanupPassResult counts and status."""

    def test_empty_pass_is_completed(self) -> None:
        result = CleanupPassResult(resource_kind=ResourceKind.ASSET)

        assert result.attempted_count == 0
        assert result.succeeded_count == 0
        assert result.failed_count == 0
        assert result.status == ReportStatus.COMPLETED

    def test_resolve_failures_are_not_attempts(self) -> None:
        """Test failed lookups count as failures but not as delete attempts."""
        result = CleanupPassResult(resource_kind=ResourceKind.LOCATOR, scanned_count=3)
        result.add(succeeded(ResourceKind.LOCATOR, "l1"))
        result.add(failed(ResourceKind.LOCATOR, "l2", CleanupStage.RESOLVE))
        result.add(failed(ResourceKind.LOCATOR, "l3"))

        assert result.attempted_count == 2
        assert result.succeeded_count == 1
        assert result.failed_count == 2
        assert [r.resource_id for r in result.failures] == ["l2", "l3"]
        assert result.status == ReportStatus.PARTIAL

    def test_only_failures_is_failed(self) -> None:
        result = CleanupPassResult(resource_kind=ResourceKind.ASSET)
        result.add(failed(ResourceKind.ASSET, None, CleanupStage.LIST))

        assert result.status == ReportStatus.FAILED


class TestCleanupReport:
    """Tests for CleanupReport aggregation."""

    def make_report(self) -> CleanupReport:
        locators = CleanupPassResult(resource_kind=ResourceKind.LOCATOR, scanned_count=1)
        locators.add(succeeded(ResourceKind.LOCATOR, "l1"))
        assets = CleanupPassResult(resource_kind=ResourceKind.ASSET, scanned_count=2)
        assets.add(succeeded(ResourceKind.ASSET, "a1"))
        assets.add(failed(ResourceKind.ASSET, "a2"))
        return CleanupReport(
            operation_id="cleanup_1",
            started_at=STARTED,
            completed_at=STARTED + timedelta(seconds=4),
            passes=[locators, assets],
        )

    def test_aggregates_counts(self) -> None:
        report = self.make_report()

        assert report.attempted_count == 3
        assert report.succeeded_count == 2
        assert report.failed_count == 1
        assert report.status == ReportStatus.PARTIAL
        assert report.duration_seconds == 4.0

    def test_duration_unknown_until_completed(self) -> None:
        report = CleanupReport(operation_id="cleanup_2", started_at=STARTED)

        assert report.duration_seconds is None

    def test_get_pass(self) -> None:
        report = self.make_report()

        assert report.get_pass(ResourceKind.ASSET).scanned_count == 2
        assert report.get_pass(ResourceKind.CONTENT_KEY) is None

    def test_summary(self) -> None:
        summary = self.make_report().summary()

        assert summary.startswith("Cleanup cleanup_1 partial")
        assert "locators: 1/1 deleted" in summary
        assert "assets: 1/2 deleted, 1 failed" in summary

    def test_to_dict(self) -> None:
        data = self.make_report().to_dict()

        assert data["status"] == "partial"
        assert data["started_at"] == "2026-10-17T12:00:00+00:00"
        assert [p["resource_kind"] for p in data["passes"]] == ["locator", "asset"]
        assert data["passes"][1]["records"][1]["error_code"] == "RuntimeError"

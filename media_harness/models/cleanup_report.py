"""Cleanup report models.

Per-pass results and the whole-run report returned by the environment reconciler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from .deletion_record import CleanupStage, DeletionRecord, DeletionStatus
from .resource_info import ResourceKind


class ReportStatus(Enum):
    """Outcome of a cleanup pass or run."""

    COMPLETED = "completed"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass
class CleanupPassResult:
    """Result of one cleanup pass over a single resource kind.

    Attributes:
        resource_kind: Kind cleaned by this pass
        scanned_count: Resources returned by the listing
        records: Delete outcomes and failures, in the order they happened
    """

    resource_kind: ResourceKind
    scanned_count: int = 0
    records: list[DeletionRecord] = field(default_factory=list)

    def add(self, record: DeletionRecord) -> None:
        self.records.append(record)

    @property
    def attempted_count(self) -> int:
        """Number of delete calls issued."""
        return sum(1 for r in self.records if r.stage == CleanupStage.DELETE)

    @property
    def succeeded_count(self) -> int:
        return sum(1 for r in self.records if r.status == DeletionStatus.SUCCEEDED)

    @property
    def failed_count(self) -> int:
        """Number of failed steps (listing, resolving and deleting)."""
        return sum(1 for r in self.records if r.status == DeletionStatus.FAILED)

    @property
    def failures(self) -> list[DeletionRecord]:
        return [r for r in self.records if r.status == DeletionStatus.FAILED]

    @property
    def status(self) -> ReportStatus:
        return _status_for(self.succeeded_count, self.failed_count)


@dataclass
class CleanupReport:
    """Report of a full reconciliation run.

    Passes are stored in the order they ran.

    Attributes:
        operation_id: Unique identifier for the run
        started_at: When the run started (UTC)
        completed_at: When the last pass finished (UTC)
        passes: Per-kind pass results in execution order
    """

    operation_id: str
    started_at: datetime
    completed_at: Optional[datetime] = None
    passes: list[CleanupPassResult] = field(default_factory=list)

    @property
    def attempted_count(self) -> int:
        return sum(p.attempted_count for p in self.passes)

    @property
    def succeeded_count(self) -> int:
        return sum(p.succeeded_count for p in self.passes)

    @property
    def failed_count(self) -> int:
        return sum(p.failed_count for p in self.passes)

    @property
    def failures(self) -> list[DeletionRecord]:
        return [record for p in self.passes for record in p.failures]

    @property
    def status(self) -> ReportStatus:
        return _status_for(self.succeeded_count, self.failed_count)

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()

    def get_pass(self, resource_kind: ResourceKind) -> Optional[CleanupPassResult]:
        """Get the pass result for a resource kind, None if it did not run."""
        for cleanup_pass in self.passes:
            if cleanup_pass.resource_kind == resource_kind:
                return cleanup_pass
        return None

    def summary(self) -> str:
        """One-line summary suitable for logging."""
        parts = [
            f"{p.resource_kind.label}: {p.succeeded_count}/{p.attempted_count} deleted"
            + (f", {p.failed_count} failed" if p.failed_count else "")
            for p in self.passes
        ]
        return f"Cleanup {self.operation_id} {self.status.value} ({'; '.join(parts)})"

    def to_dict(self) -> dict[str, Any]:
        """Convert report to a plain dictionary (used by the audit log)."""
        return {
            "operation_id": self.operation_id,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_seconds": self.duration_seconds,
            "status": self.status.value,
            "attempted_count": self.attempted_count,
            "succeeded_count": self.succeeded_count,
            "failed_count": self.failed_count,
            "passes": [
                {
                    "resource_kind": p.resource_kind.value,
                    "scanned_count": p.scanned_count,
                    "attempted_count": p.attempted_count,
                    "succeeded_count": p.succeeded_count,
                    "failed_count": p.failed_count,
                    "status": p.status.value,
                    "records": [
                        {
                            "resource_id": record.resource_id,
                            "stage": record.stage.value,
                            "status": record.status.value,
                            "timestamp": record.timestamp.isoformat(),
                            "error_code": record.error_code,
                            "error_message": record.error_message,
                        }
                        for record in p.records
                    ],
                }
                for p in self.passes
            ],
        }


def _status_for(succeeded_count: int, failed_count: int) -> ReportStatus:
    if failed_count > 0:
        if succeeded_count > 0:
            return ReportStatus.PARTIAL
        return ReportStatus.FAILED
    return ReportStatus.COMPLETED

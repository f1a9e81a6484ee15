"""Audit storage for cleanup runs.

Stores cleanup reports in YAML format for troubleshooting of
shared test environments.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import yaml

from media_harness.models.cleanup_report import CleanupReport


class AuditStorage:
    """Cleanup audit log storage.

    Stores cleanup reports as YAML files organized by year/month. Directories
    are created on the first write.

    Storage structure:
        <storage_dir>/
            2026/
                10/
                    cleanup-cleanup_123.yaml

    Attributes:
        storage_dir: Base directory for audit logs
    """

    def __init__(self, storage_dir: Optional[str] = None) -> None:
        """Initialize audit storage.

        Args:
            storage_dir: Base directory for audit logs (default: ~/.media-harness/audit-logs)
        """
        if storage_dir is None:
            storage_dir = str(Path.home() / ".media-harness" / "audit-logs")

        self.storage_dir = Path(storage_dir)

    def log_report(self, report: CleanupReport) -> Path:
        """Write a cleanup report to audit storage.

        Overwrites an existing log with the same operation ID.

        Args:
            report: Cleanup report to log

        Returns:
            Path of the written audit file
        """
        year_month_dir = self.storage_dir / str(report.started_at.year) / f"{report.started_at.month:02d}"
        year_month_dir.mkdir(parents=True, exist_ok=True)

        audit_data = {
            "metadata": {
                "version": "1.0",
                "log_type": "environment_cleanup",
                "created_at": datetime.now(timezone.utc).isoformat(),
            },
            "report": report.to_dict(),
        }

        audit_file = year_month_dir / f"cleanup-{report.operation_id}.yaml"
        with open(audit_file, "w") as f:
            yaml.dump(audit_data, f, default_flow_style=False, sort_keys=False)

        return audit_file

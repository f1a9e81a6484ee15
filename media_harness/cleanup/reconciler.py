"""Environment reconciler for shared media service test environments.

Deletes resources left behind by test runs so a suite starts and ends against a
clean baseline. Runs four passes in dependency order: locators, assets, access
policies, content keys. Assets with live locators cannot be deleted, so
locators always go first.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from media_harness.cleanup.audit import AuditStorage
from media_harness.cleanup.markers import TestResourceMarkers
from media_harness.client.base import ResourceClient
from media_harness.models.cleanup_report import CleanupPassResult, CleanupReport
from media_harness.models.deletion_record import CleanupStage, DeletionRecord, DeletionStatus
from media_harness.models.resource_info import HasIdentity, ResourceKind

logger = logging.getLogger(__name__)


class EnvironmentReconciler:
    """Best-effort, dependency-ordered cleanup of test resources.

    Every pass is fault-tolerant on its own: a failed listing ends that pass,
    a failed lookup or delete is recorded and the pass moves on. No error ever
    escapes reconcile(), so it is safe both before a suite (environment may be
    dirty from a crashed run) and after it (must not mask the suite result).
    Each resource gets a single attempt, no retries.

    Attributes:
        client: Resource client used to list, get and delete
        markers: Name-prefix policy identifying test resources
        audit_storage: Optional audit log for cleanup reports
    """

    def __init__(
        self,
        client: ResourceClient,
        markers: Optional[TestResourceMarkers] = None,
        audit_storage: Optional[AuditStorage] = None,
    ) -> None:
        """Initialize environment reconciler.

        Args:
            client: Resource client instance
            markers: Test resource markers (default prefixes if not provided)
            audit_storage: Audit storage for cleanup reports (optional)
        """
        self.client = client
        self.markers = markers or TestResourceMarkers()
        self.audit_storage = audit_storage

    def reconcile(self) -> CleanupReport:
        """Remove all test resources from the remote environment.

        Returns:
            CleanupReport with one pass result per resource kind, in run order
        """
        report = CleanupReport(operation_id=f"cleanup_{uuid.uuid4()}", started_at=_now())

        for cleanup_pass in (
            self.remove_test_locators,
            self.remove_test_assets,
            self.remove_test_access_policies,
            self.remove_test_content_keys,
        ):
            report.passes.append(cleanup_pass())

        report.completed_at = _now()
        self._log_report(report)
        return report

    def remove_test_locators(self) -> CleanupPassResult:
        """Delete locators whose referenced asset is a test asset."""
        return self._run_pass(ResourceKind.LOCATOR, self._locator_is_ours)

    def remove_test_assets(self) -> CleanupPassResult:
        """Delete assets carrying the test asset prefix."""
        return self._run_pass(ResourceKind.ASSET, lambda info, result: self.markers.is_test_asset(info.name))

    def remove_test_access_policies(self) -> CleanupPassResult:
        """Delete access policies carrying the test policy prefix."""
        return self._run_pass(ResourceKind.ACCESS_POLICY, lambda info, result: self.markers.is_test_policy(info.name))

    def remove_test_content_keys(self) -> CleanupPassResult:
        """Delete every content key; they are all test-scoped."""
        return self._run_pass(ResourceKind.CONTENT_KEY, lambda info, result: True)

    def _run_pass(
        self,
        kind: ResourceKind,
        is_ours: Callable[[HasIdentity, CleanupPassResult], bool],
    ) -> CleanupPassResult:
        """List one kind and delete every item ``is_ours`` accepts.

        ``is_ours`` may record its own failures on the pass result and return
        False to skip the item.
        """
        result = CleanupPassResult(resource_kind=kind)

        try:
            infos = list(self.client.list_resources(kind))
        except Exception as e:
            logger.warning(f"Failed to list {kind.label}: {e}")
            result.add(DeletionRecord.from_error(kind, None, CleanupStage.LIST, e, _now()))
            return result

        result.scanned_count = len(infos)
        logger.debug(f"Found {len(infos)} {kind.label}")

        for info in infos:
            try:
                resource_id = info.id
                if not is_ours(info, result):
                    continue
            except Exception as e:
                logger.warning(f"Failed to inspect {kind.value}: {e}")
                result.add(DeletionRecord.from_error(kind, getattr(info, "id", None), CleanupStage.RESOLVE, e, _now()))
                continue

            result.add(self._delete(kind, resource_id))

        return result

    def _locator_is_ours(self, locator: HasIdentity, result: CleanupPassResult) -> bool:
        try:
            asset = self.client.get_resource(ResourceKind.ASSET, locator.asset_id)
        except Exception as e:
            logger.warning(f"Failed to resolve asset {locator.asset_id} of locator {locator.id}: {e}")
            result.add(DeletionRecord.from_error(ResourceKind.LOCATOR, locator.id, CleanupStage.RESOLVE, e, _now()))
            return False

        return self.markers.is_test_asset(asset.name)

    def _delete(self, kind: ResourceKind, resource_id: str) -> DeletionRecord:
        try:
            self.client.delete_resource(kind, resource_id)
        except Exception as e:
            logger.warning(f"Failed to delete {kind.value} {resource_id}: {e}")
            return DeletionRecord.from_error(kind, resource_id, CleanupStage.DELETE, e, _now())

        logger.info(f"Deleted {kind.value} {resource_id}")
        return DeletionRecord(
            resource_kind=kind,
            resource_id=resource_id,
            stage=CleanupStage.DELETE,
            status=DeletionStatus.SUCCEEDED,
            timestamp=_now(),
        )

    def _log_report(self, report: CleanupReport) -> None:
        if report.failed_count:
            logger.warning(report.summary())
        else:
            logger.info(report.summary())

        if self.audit_storage is None:
            return

        try:
            self.audit_storage.log_report(report)
        except Exception as e:
            logger.warning(f"Failed to write cleanup audit log for {report.operation_id}: {e}")


def _now() -> datetime:
    return datetime.now(timezone.utc)

"""Field-equality delegates for each resource kind.

Each delegate compares the non-identity fields of an expected and an actual
info and raises AssertionFailure on the first mismatch. Timestamps are compared
approximately, everything else exactly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models.resource_info import (
    AccessPolicyInfo,
    AssetInfo,
    ContentKeyInfo,
    LocatorInfo,
    ResourceKind,
)
from .errors import assert_equal
from .listdiff import FieldDelegate
from .timecompare import DEFAULT_TOLERANCE, DateTolerance, assert_date_approx_equal


class InfoFieldVerifier:
    """Kind-specific field comparisons for use with verify_list_result_contains."""

    def __init__(self, tolerance: DateTolerance = DEFAULT_TOLERANCE) -> None:
        self.tolerance = tolerance

    def delegate_for(self, kind: ResourceKind) -> FieldDelegate:
        """Get the field delegate for a resource kind."""
        return {
            ResourceKind.ASSET: self.verify_asset,
            ResourceKind.ACCESS_POLICY: self.verify_access_policy,
            ResourceKind.LOCATOR: self.verify_locator,
            ResourceKind.CONTENT_KEY: self.verify_content_key,
        }[kind]

    def verify_asset(self, message: str, expected: AssetInfo, actual: AssetInfo) -> None:
        assert_equal(f"{message}: name", expected.name, actual.name)
        assert_equal(f"{message}: state", expected.state, actual.state)
        assert_equal(f"{message}: alternate_id", expected.alternate_id, actual.alternate_id)
        assert_equal(f"{message}: options", expected.options, actual.options)
        self._dates(message, "created", expected.created, actual.created)
        self._dates(message, "last_modified", expected.last_modified, actual.last_modified)

    def verify_access_policy(self, message: str, expected: AccessPolicyInfo, actual: AccessPolicyInfo) -> None:
        assert_equal(f"{message}: name", expected.name, actual.name)
        assert_equal(f"{message}: duration_in_minutes", expected.duration_in_minutes, actual.duration_in_minutes)
        assert_equal(f"{message}: permissions", sorted(expected.permissions), sorted(actual.permissions))
        self._dates(message, "created", expected.created, actual.created)
        self._dates(message, "last_modified", expected.last_modified, actual.last_modified)

    def verify_locator(self, message: str, expected: LocatorInfo, actual: LocatorInfo) -> None:
        assert_equal(f"{message}: asset_id", expected.asset_id, actual.asset_id)
        assert_equal(f"{message}: access_policy_id", expected.access_policy_id, actual.access_policy_id)
        assert_equal(f"{message}: locator_type", expected.locator_type, actual.locator_type)
        assert_equal(f"{message}: path", expected.path, actual.path)
        self._dates(message, "start_time", expected.start_time, actual.start_time)
        self._dates(message, "expiration_datetime", expected.expiration_datetime, actual.expiration_datetime)

    def verify_content_key(self, message: str, expected: ContentKeyInfo, actual: ContentKeyInfo) -> None:
        assert_equal(f"{message}: name", expected.name, actual.name)
        assert_equal(f"{message}: content_key_type", expected.content_key_type, actual.content_key_type)
        assert_equal(f"{message}: protection_key_id", expected.protection_key_id, actual.protection_key_id)
        self._dates(message, "created", expected.created, actual.created)
        self._dates(message, "last_modified", expected.last_modified, actual.last_modified)

    def _dates(
        self, message: str, field_name: str, expected: Optional[datetime], actual: Optional[datetime]
    ) -> None:
        assert_date_approx_equal(expected, actual, f"{message}: {field_name}", self.tolerance)

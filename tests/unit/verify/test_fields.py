"""Unit tests for kind-specific field delegates."""

from __future__ import annotations

from datetime import timedelta

import pytest

from media_harness.models.resource_info import ResourceKind
from media_harness.verify.errors import AssertionFailure, assert_equal
from media_harness.verify.fields import InfoFieldVerifier
from media_harness.verify.listdiff import verify_list_result_contains
from media_harness.verify.timecompare import DateTolerance
from tests.fixtures.media_service import (
    create_access_policy,
    create_asset,
    create_content_key,
    create_locator,
)


class TestAssertEqual:
    """Tests for assert_equal."""

    def test_equal_values_pass(self) -> None:
        assert_equal("name", "x", "x")

    def test_message_format(self) -> None:
        """Test the failure message shows both values."""
        with pytest.raises(AssertionFailure) as exc_info:
            assert_equal("asset 0: name", "testAsset1", "other")

        assert str(exc_info.value) == "asset 0: name expected:<'testAsset1'> but was:<'other'>"


class TestInfoFieldVerifier:
    """Tests for InfoFieldVerifier."""

    @pytest.fixture
    def verifier(self) -> InfoFieldVerifier:
        return InfoFieldVerifier()

    def test_asset_matches_with_skewed_dates(self, verifier: InfoFieldVerifier) -> None:
        """Test assets with dates 8 hours apart still match."""
        expected = create_asset("testAsset1", asset_id="nb:cid:UUID:1")
        actual = create_asset("testAsset1", asset_id="nb:cid:UUID:1")
        actual.created = expected.created + timedelta(hours=8, seconds=3)

        verifier.verify_asset("asset", expected, actual)

    def test_asset_name_mismatch(self, verifier: InfoFieldVerifier) -> None:
        """Test a differing name is reported with its field label."""
        expected = create_asset("testAsset1", asset_id="nb:cid:UUID:1")
        actual = create_asset("testAsset2", asset_id="nb:cid:UUID:1")

        with pytest.raises(AssertionFailure, match="asset: name"):
            verifier.verify_asset("asset", expected, actual)

    def test_asset_date_mismatch(self, verifier: InfoFieldVerifier) -> None:
        """Test a date beyond tolerance is reported."""
        expected = create_asset(asset_id="nb:cid:UUID:1")
        actual = create_asset(asset_id="nb:cid:UUID:1")
        actual.last_modified = expected.last_modified + timedelta(minutes=3)

        with pytest.raises(AssertionFailure, match="last_modified"):
            verifier.verify_asset("asset", expected, actual)

    def test_access_policy_permissions_order_ignored(self, verifier: InfoFieldVerifier) -> None:
        """Test permission order does not matter."""
        expected = create_access_policy(policy_id="nb:pid:UUID:1")
        expected.permissions = ["read", "write"]
        actual = create_access_policy(policy_id="nb:pid:UUID:1")
        actual.permissions = ["write", "read"]

        verifier.verify_access_policy("policy", expected, actual)

    def test_locator_asset_mismatch(self, verifier: InfoFieldVerifier) -> None:
        """Test a locator pointing at another asset is reported."""
        expected = create_locator(create_asset(asset_id="nb:cid:UUID:1"), locator_id="nb:lid:UUID:1")
        actual = create_locator(create_asset(asset_id="nb:cid:UUID:2"), locator_id="nb:lid:UUID:1")

        with pytest.raises(AssertionFailure, match="asset_id"):
            verifier.verify_locator("locator", expected, actual)

    def test_content_key_strict_tolerance(self) -> None:
        """Test the verifier honors a custom tolerance."""
        verifier = InfoFieldVerifier(DateTolerance(offset_correction=None))
        expected = create_content_key(key_id="nb:kid:UUID:1")
        actual = create_content_key(key_id="nb:kid:UUID:1")
        actual.created = expected.created + timedelta(hours=8)

        with pytest.raises(AssertionFailure, match="created"):
            verifier.verify_content_key("key", expected, actual)

    @pytest.mark.parametrize(
        "kind, method",
        [
            (ResourceKind.ASSET, "verify_asset"),
            (ResourceKind.ACCESS_POLICY, "verify_access_policy"),
            (ResourceKind.LOCATOR, "verify_locator"),
            (ResourceKind.CONTENT_KEY, "verify_content_key"),
        ],
    )
    def test_delegate_for_kind(self, verifier: InfoFieldVerifier, kind: ResourceKind, method: str) -> None:
        """Test each kind maps to its delegate."""
        assert verifier.delegate_for(kind) == getattr(verifier, method)

    def test_delegate_used_by_list_verification(self, verifier: InfoFieldVerifier) -> None:
        """Test a mismatch found by the delegate carries the positional label."""
        expected = create_asset("testAsset1", asset_id="nb:cid:UUID:1")
        actual = create_asset("testAsset1", asset_id="nb:cid:UUID:1")
        actual.state = "Published"

        with pytest.raises(AssertionFailure, match="assets: orderedAndFilteredActualInfo 0: state"):
            verify_list_result_contains(
                [expected], [actual], verifier.delegate_for(ResourceKind.ASSET), message="assets"
            )

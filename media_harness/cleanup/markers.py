"""Name-prefix policy identifying harness-created resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_ASSET_PREFIX = "testAsset"
DEFAULT_POLICY_PREFIX = "testPolicy"
DEFAULT_CONTENT_KEY_PREFIX = "testContentKey"


@dataclass(frozen=True)
class TestResourceMarkers:
    """Name prefixes carried by resources the harness created.

    Locators have no name; they are matched through their asset. Content keys
    are cleaned unconditionally, their prefix only names new keys.
    """

    __test__ = False

    asset_prefix: str = DEFAULT_ASSET_PREFIX
    policy_prefix: str = DEFAULT_POLICY_PREFIX
    content_key_prefix: str = DEFAULT_CONTENT_KEY_PREFIX

    def __post_init__(self) -> None:
        for name in ("asset_prefix", "policy_prefix", "content_key_prefix"):
            if not getattr(self, name):
                raise ValueError(f"{name} cannot be empty")

    def is_test_asset(self, name: Optional[str]) -> bool:
        return _has_prefix(name, self.asset_prefix)

    def is_test_policy(self, name: Optional[str]) -> bool:
        return _has_prefix(name, self.policy_prefix)

    def asset_name(self, suffix: str) -> str:
        return f"{self.asset_prefix}{suffix}"


def _has_prefix(name: Optional[str], prefix: str) -> bool:
    return bool(name) and name.startswith(prefix)

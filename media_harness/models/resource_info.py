"""Resource info models for media service entities.

Snapshots of remote resources as returned by a resource client. Instances are
never cached or mutated by the harness; the remote service owns their state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class ResourceKind(Enum):
    """Media service resource kinds."""

    ASSET = "asset"
    ACCESS_POLICY = "access_policy"
    LOCATOR = "locator"
    CONTENT_KEY = "content_key"

    @property
    def label(self) -> str:
        """Human-readable plural label (e.g., "access policies")."""
        return {
            ResourceKind.ASSET: "assets",
            ResourceKind.ACCESS_POLICY: "access policies",
            ResourceKind.LOCATOR: "locators",
            ResourceKind.CONTENT_KEY: "content keys",
        }[self]


@runtime_checkable
class HasIdentity(Protocol):
    """Anything carrying an opaque, service-assigned identity."""

    @property
    def id(self) -> str: ...


@dataclass
class AssetInfo:
    """Asset snapshot.

    Attributes:
        id: Service-assigned identifier (``nb:cid:UUID:...``)
        name: Asset name, carries the test marker prefix for harness-created assets
        state: Asset state as reported by the service
        created: Creation timestamp
        last_modified: Last modification timestamp
        alternate_id: Caller-supplied alternate identifier
        options: Encryption/creation options bit field
    """

    id: str
    name: Optional[str] = None
    state: Optional[str] = None
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    alternate_id: Optional[str] = None
    options: int = 0


@dataclass
class AccessPolicyInfo:
    """Access policy snapshot."""

    id: str
    name: Optional[str] = None
    duration_in_minutes: Optional[float] = None
    permissions: list[str] = field(default_factory=list)
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = None


@dataclass
class LocatorInfo:
    """Locator snapshot.

    Locators have no name of their own. ``asset_id`` is a by-id reference that
    must be resolved through the resource client.
    """

    id: str
    asset_id: str
    access_policy_id: Optional[str] = None
    locator_type: Optional[str] = None
    path: Optional[str] = None
    start_time: Optional[datetime] = None
    expiration_datetime: Optional[datetime] = None


@dataclass
class ContentKeyInfo:
    """Content key snapshot."""

    id: str
    name: Optional[str] = None
    content_key_type: Optional[str] = None
    protection_key_id: Optional[str] = None
    created: Optional[datetime] = None
    last_modified: Optional[datetime] = None


"""Data models for media service resources and cleanup results."""

from __future__ import annotations

from .cleanup_report import CleanupPassResult, CleanupReport, ReportStatus
from .deletion_record import CleanupStage, DeletionRecord, DeletionStatus
from .resource_info import (
    AccessPolicyInfo,
    AssetInfo,
    ContentKeyInfo,
    HasIdentity,
    LocatorInfo,
    ResourceKind,
)

__all__ = [
    "AccessPolicyInfo",
    "AssetInfo",
    "CleanupPassResult",
    "CleanupReport",
    "CleanupStage",
    "ContentKeyInfo",
    "DeletionRecord",
    "DeletionStatus",
    "HasIdentity",
    "LocatorInfo",
    "ReportStatus",
    "ResourceKind",
]

"""Deletion record model.

Outcome of a single cleanup step against one remote resource.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .resource_info import ResourceKind


class DeletionStatus(Enum):
    """Individual resource cleanup status."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


class CleanupStage(Enum):
    """Step of a cleanup pass at which a record was produced."""

    LIST = "list"
    RESOLVE = "resolve"
    DELETE = "delete"


@dataclass
class DeletionRecord:
    """Deletion record entity.

    Represents one cleanup step for one resource. Each record belongs to a
    CleanupPassResult. Listing failures have no resource and carry
    ``resource_id=None``.

    Attributes:
        resource_kind: Kind of the resource (or of the listing that failed)
        resource_id: Opaque service identifier, None for listing failures
        stage: Step at which the record was produced
        status: Outcome of the step
        timestamp: When the step was attempted (UTC)
        error_code: Exception class name if failed
        error_message: Human-readable error if failed
    """

    resource_kind: ResourceKind
    resource_id: Optional[str]
    stage: CleanupStage
    status: DeletionStatus
    timestamp: datetime
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def from_error(
        cls,
        resource_kind: ResourceKind,
        resource_id: Optional[str],
        stage: CleanupStage,
        error: Exception,
        timestamp: datetime,
    ) -> DeletionRecord:
        """Build a failed record from a caught exception."""
        return cls(
            resource_kind=resource_kind,
            resource_id=resource_id,
            stage=stage,
            status=DeletionStatus.FAILED,
            timestamp=timestamp,
            error_code=type(error).__name__,
            error_message=str(error),
        )

"""Errors raised by resource client implementations."""

from __future__ import annotations

from typing import Optional

from ..models.resource_info import ResourceKind


class ResourceClientError(Exception):
    """Base class for failures reported by a resource client.

    Attributes:
        resource_kind: Kind of resource the call targeted
        resource_id: Identifier passed to the call, if any
    """

    def __init__(
        self,
        message: str,
        resource_kind: Optional[ResourceKind] = None,
        resource_id: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.resource_kind = resource_kind
        self.resource_id = resource_id


class ResourceNotFoundError(ResourceClientError):
    """Identifier is well-formed but names no existing resource."""


class ResourceValidationError(ResourceClientError):
    """Identifier is not well-formed."""


class DependencyConflictError(ResourceClientError):
    """Resource has dependents that block deletion (e.g., an asset with locators)."""

"""Resource client contract consumed by the harness."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..models.resource_info import HasIdentity, ResourceKind


class ResourceClient(ABC):
    """Abstract authenticated client for the media service.

    Implementations own authentication, transport and any timeout policy.
    All calls are blocking. Failures should be raised as ResourceClientError
    subclasses, but the harness tolerates any exception during cleanup.
    """

    @abstractmethod
    def list_resources(self, kind: ResourceKind) -> Sequence[HasIdentity]:
        """List all resources of a kind visible to the caller.

        Args:
            kind: Resource kind to list

        Returns:
            Resource infos in no guaranteed order
        """

    @abstractmethod
    def get_resource(self, kind: ResourceKind, resource_id: str) -> HasIdentity:
        """Fetch a single resource.

        Raises:
            ResourceNotFoundError: If the identifier names no existing resource
            ResourceValidationError: If the identifier is not well-formed
        """

    @abstractmethod
    def delete_resource(self, kind: ResourceKind, resource_id: str) -> None:
        """Delete a single resource.

        Raises:
            ResourceNotFoundError: If the resource does not exist
            DependencyConflictError: If dependents block the deletion
        """

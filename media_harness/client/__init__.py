"""Resource client contract and error taxonomy."""

from __future__ import annotations

from .base import ResourceClient
from .errors import (
    DependencyConflictError,
    ResourceClientError,
    ResourceNotFoundError,
    ResourceValidationError,
)

__all__ = [
    "DependencyConflictError",
    "ResourceClient",
    "ResourceClientError",
    "ResourceNotFoundError",
    "ResourceValidationError",
]

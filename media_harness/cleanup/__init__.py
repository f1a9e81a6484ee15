"""Environment cleanup module.

This module deletes media service resources left behind by test runs, in an
order that respects the locator-to-asset dependency.

Classes:
    EnvironmentReconciler: Dependency-ordered, best-effort cleanup
    TestResourceMarkers: Name prefixes identifying test resources
    AuditStorage: Audit log storage and retrieval
    CleanupReporter: Console rendering of cleanup reports
"""

from __future__ import annotations

from .audit import AuditStorage
from .markers import TestResourceMarkers
from .reconciler import EnvironmentReconciler
from .reporter import CleanupReporter

__all__ = [
    "EnvironmentReconciler",
    "TestResourceMarkers",
    "AuditStorage",
    "CleanupReporter",
]

"""Explicit per-run harness context.

Holds the authenticated client and resolved configuration for one test-suite
run and hands out reconcilers and verifiers bound to them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .cleanup.audit import AuditStorage
from .cleanup.markers import TestResourceMarkers
from .cleanup.reconciler import EnvironmentReconciler
from .client.base import ResourceClient
from .client.factory import ClientFactory, load_client_factory
from .config import URI, Config
from .errors import ConfigurationError
from .verify.fields import InfoFieldVerifier
from .verify.timecompare import DateTolerance

logger = logging.getLogger(__name__)


@dataclass
class HarnessContext:
    """Client and configuration shared by one suite run.

    Attributes:
        client: Authenticated resource client
        config: Resolved configuration
    """

    client: ResourceClient
    config: Config

    @classmethod
    def create(cls, config: Config, client_factory: Optional[ClientFactory] = None) -> HarnessContext:
        """Build a context, constructing the client from a factory.

        Args:
            config: Resolved configuration
            client_factory: Factory to use, else the one named by ``config.client_factory``

        Raises:
            ConfigurationError: If no factory is configured or it cannot build a client
        """
        if client_factory is None:
            if not config.client_factory:
                raise ConfigurationError("No client factory configured (set client_factory or --client-factory)")
            client_factory = load_client_factory(config.client_factory)

        try:
            client = client_factory(config)
        except Exception as e:
            raise ConfigurationError(f"Client factory failed: {e}") from e

        if not isinstance(client, ResourceClient):
            raise ConfigurationError(f"Client factory returned {type(client).__name__}, not a ResourceClient")

        logger.debug(f"Created harness context with {type(client).__name__} for {config.service.get(URI)}")
        return cls(client=client, config=config)

    @property
    def markers(self) -> TestResourceMarkers:
        return TestResourceMarkers(
            asset_prefix=self.config.asset_prefix,
            policy_prefix=self.config.policy_prefix,
            content_key_prefix=self.config.content_key_prefix,
        )

    @property
    def date_tolerance(self) -> DateTolerance:
        return DateTolerance(skew=self.config.date_tolerance, offset_correction=self.config.timezone_offset)

    def reconciler(self) -> EnvironmentReconciler:
        """Build a reconciler bound to this context's client and markers."""
        audit_storage = AuditStorage(self.config.audit_dir) if self.config.audit_dir else None
        return EnvironmentReconciler(self.client, markers=self.markers, audit_storage=audit_storage)

    def field_verifier(self) -> InfoFieldVerifier:
        """Build field delegates using this context's date tolerance."""
        return InfoFieldVerifier(self.date_tolerance)

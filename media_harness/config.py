"""Harness configuration.

Loaded from a YAML file, with media service keys overridable from the
environment. Service keys use the same dotted names in the file and in the
environment, e.g. ``media.oauth.client.id``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

URI = "media.uri"
OAUTH_URI = "media.oauth.uri"
OAUTH_CLIENT_ID = "media.oauth.client.id"
OAUTH_CLIENT_SECRET = "media.oauth.client.secret"
OAUTH_SCOPE = "media.oauth.scope"

SERVICE_KEYS = (URI, OAUTH_URI, OAUTH_CLIENT_ID, OAUTH_CLIENT_SECRET, OAUTH_SCOPE)

CONFIG_PATH_ENV = "MEDIA_HARNESS_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".media-harness" / "config.yaml"

REDACTED = "********"


@dataclass
class Config:
    """Resolved harness configuration.

    Attributes:
        service: Media service properties keyed by their dotted names
        log_level: Default log level when neither --verbose nor --quiet is given
        asset_prefix: Name prefix marking harness-created assets
        policy_prefix: Name prefix marking harness-created access policies
        content_key_prefix: Name prefix given to harness-created content keys
        date_tolerance_seconds: Clock skew tolerated by date comparisons
        timezone_offset_hours: Timezone misreport corrected by date comparisons,
            None disables the correction
        audit_dir: Directory for cleanup audit logs, None disables auditing
        client_factory: ``module:callable`` building the resource client
    """

    service: dict[str, Optional[str]] = field(default_factory=lambda: {key: None for key in SERVICE_KEYS})
    log_level: str = "INFO"
    asset_prefix: str = "testAsset"
    policy_prefix: str = "testPolicy"
    content_key_prefix: str = "testContentKey"
    date_tolerance_seconds: float = 30.0
    timezone_offset_hours: Optional[float] = 8.0
    audit_dir: Optional[str] = None
    client_factory: Optional[str] = None

    @classmethod
    def load(cls, path: Optional[str] = None) -> Config:
        """Load configuration from YAML and apply environment overrides.

        The file is taken from ``path``, else ``$MEDIA_HARNESS_CONFIG``, else
        ``~/.media-harness/config.yaml``. A missing default file yields defaults;
        a missing explicit file is an error.

        Raises:
            ConfigurationError: If an explicit file is missing or any file is invalid
        """
        explicit = path or os.environ.get(CONFIG_PATH_ENV)
        config_path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH

        data: dict[str, Any] = {}
        if config_path.exists():
            data = cls._read_yaml(config_path)
            logger.debug(f"Loaded configuration from {config_path}")
        elif explicit:
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        config = cls.from_dict(data)
        config.apply_env_overrides()
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build configuration from a parsed YAML mapping.

        Raises:
            ConfigurationError: If a key is unknown or its value is invalid
        """
        config = cls()
        known = {f.name for f in fields(cls)} - {"service"}

        for key, value in data.items():
            if key in SERVICE_KEYS:
                config.service[key] = None if value is None else str(value)
            elif key in known:
                setattr(config, key, _coerce(key, value))
            else:
                raise ConfigurationError(f"Unknown configuration key: {key}")

        return config

    def apply_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Override service keys from environment variables of the same name."""
        environ = os.environ if environ is None else environ
        for key in SERVICE_KEYS:
            value = environ.get(key)
            if value is None:
                continue
            logger.debug(f"Overriding {key} from environment")
            self.service[key] = value

    def service_properties(self) -> dict[str, Optional[str]]:
        """Media service properties handed to the client factory."""
        return dict(self.service)

    @property
    def date_tolerance(self) -> timedelta:
        return timedelta(seconds=self.date_tolerance_seconds)

    @property
    def timezone_offset(self) -> Optional[timedelta]:
        if self.timezone_offset_hours is None:
            return None
        return timedelta(hours=self.timezone_offset_hours)

    def redacted(self) -> dict[str, Any]:
        """Configuration as a flat dictionary with the client secret masked."""
        result: dict[str, Any] = self.service_properties()
        if result.get(OAUTH_CLIENT_SECRET):
            result[OAUTH_CLIENT_SECRET] = REDACTED
        for f in fields(self):
            if f.name != "service":
                result[f.name] = getattr(self, f.name)
        return result

    @staticmethod
    def _read_yaml(config_path: Path) -> dict[str, Any]:
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {config_path} must be a mapping")
        return data


PREFIX_KEYS = ("asset_prefix", "policy_prefix", "content_key_prefix")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce(key: str, value: Any) -> Any:
    """Check a harness key's value and convert it to the attribute type."""
    if key in PREFIX_KEYS:
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"{key} must be a non-empty string")
        return value

    if key == "log_level":
        if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return value.upper()

    if key == "date_tolerance_seconds":
        seconds = _number(key, value)
        if seconds < 0:
            raise ConfigurationError(f"{key} cannot be negative")
        return seconds

    if key == "timezone_offset_hours":
        return None if value is None else _number(key, value)

    return None if value is None else str(value)


def _number(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be a number, got {value!r}") from e

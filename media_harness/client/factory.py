"""Resolution of resource client factories from ``module:attribute`` paths."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Callable

from ..errors import ConfigurationError
from .base import ResourceClient

if TYPE_CHECKING:
    from ..config import Config

logger = logging.getLogger(__name__)

ClientFactory = Callable[["Config"], ResourceClient]


def load_client_factory(path: str) -> ClientFactory:
    """Import a client factory from a ``package.module:callable`` path.

    Args:
        path: Dotted module path and attribute name separated by a colon

    Returns:
        The factory callable

    Raises:
        ConfigurationError: If the path is malformed, the module cannot be
            imported, or the attribute is missing or not callable
    """
    module_name, sep, attr_name = path.partition(":")
    if not sep or not module_name or not attr_name:
        raise ConfigurationError(f"Invalid client factory '{path}', expected 'module:callable'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import client factory module '{module_name}': {e}") from e

    factory = getattr(module, attr_name, None)
    if factory is None or not callable(factory):
        raise ConfigurationError(f"Client factory '{path}' is missing or not callable")

    logger.debug(f"Loaded client factory {path}")
    return factory

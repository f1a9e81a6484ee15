"""Helpers for test suites running against a shared media service environment."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from .context import HarnessContext

logger = logging.getLogger(__name__)

VALID_BUT_NONEXISTENT_ASSET_ID = "nb:cid:UUID:0239f11f-2d36-4e5f-aa35-44d58ccc0973"
VALID_BUT_NONEXISTENT_ACCESS_POLICY_ID = "nb:pid:UUID:38dcb3a0-ef64-4ad0-bbb5-67a14c6df2f7"
VALID_BUT_NONEXISTENT_LOCATOR_ID = "nb:lid:UUID:92a70402-fca9-4aa3-80d7-d4de3792a27a"
INVALID_ID = "notAValidId"


@contextmanager
def reconciled_environment(context: HarnessContext) -> Iterator[HarnessContext]:
    """Clean the environment before and after the wrapped suite.

    The closing cleanup runs even when the body raises, and neither cleanup
    can raise, so the suite's own outcome is never masked.

    Example:
        @pytest.fixture(scope="session")
        def media(harness_context):
            with reconciled_environment(harness_context) as context:
                yield context
    """
    reconciler = context.reconciler()
    logger.info("Cleaning media service environment before suite")
    reconciler.reconcile()
    try:
        yield context
    finally:
        logger.info("Cleaning media service environment after suite")
        reconciler.reconcile()

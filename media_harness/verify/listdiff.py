"""Order-insensitive subset verification of resource listings.

Checks that every expected resource appears in a live listing by identity, then
hands each (expected, actual) pair to a caller-supplied field comparison.
"""

from __future__ import annotations

import logging
from typing import Callable, Collection, Optional, Sequence, TypeVar

from ..models.resource_info import HasIdentity
from .errors import AssertionFailure, assert_equal, assert_true

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=HasIdentity)

FieldDelegate = Callable[[str, T, T], None]


def verify_list_result_contains(
    expected_infos: Sequence[T],
    actual_infos: Optional[Collection[T]],
    delegate: Optional[FieldDelegate] = None,
    message: str = "",
) -> list[T]:
    """Verify an actual listing contains every expected resource.

    Args:
        expected_infos: Expected resources, in the order pairs are reported
        actual_infos: Observed resources, any order, may hold extra items
        delegate: Called as ``delegate(label, expected, actual)`` for every
            matched pair; raises AssertionFailure on field mismatch
        message: Label prefix for failure messages

    Returns:
        Matched actual resources in the order of ``expected_infos``

    Raises:
        AssertionFailure: If the listing is absent, smaller than expected, or
            misses an expected identity
    """
    if actual_infos is None:
        raise AssertionFailure(f"{message}: actualInfos")

    assert_true(
        f"{message}: actual size should be same size or larger than expected size",
        len(actual_infos) >= len(expected_infos),
    )

    actual_ids = [(_identity_of(info), info) for info in actual_infos]

    ordered_and_filtered: list[T] = []
    for expected_info in expected_infos:
        expected_id = _identity_of(expected_info)
        if expected_id is None:
            continue
        for actual_id, actual_info in actual_ids:
            if actual_id is not None and actual_id == expected_id:
                ordered_and_filtered.append(actual_info)
                break

    assert_equal(
        f"{message}: actual filtered size should be same as expected size",
        len(expected_infos),
        len(ordered_and_filtered),
    )

    if delegate is not None:
        for i, (expected_info, actual_info) in enumerate(zip(expected_infos, ordered_and_filtered)):
            delegate(f"{message}: orderedAndFilteredActualInfo {i}", expected_info, actual_info)

    return ordered_and_filtered


def _identity_of(info: HasIdentity) -> Optional[str]:
    """Read an item's identity, None if it cannot be read."""
    try:
        return info.id
    except Exception as e:
        logger.warning(f"Cannot read identity of {type(info).__name__}, dropping it: {e}")
        return None
